"""User repository for persistence lookups."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from chirper.models.user import User
from chirper.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It NEVER hashes passwords or issues tokens; callers hand in the hash.
    """

    model = User

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by exact email.

        :param email: Email address as submitted.
        :returns: User instance or ``None`` when not found.
        """
        stmt = select(User).where(User.email == email)
        result = self.session.execute(stmt).scalars().first()
        return cast(User | None, result)

    def create(self, *, name: str, email: str, password_hash: str) -> User:
        """Stage and flush a new user. Uniqueness is enforced by ``uq_users_email``."""
        return self.add(User(name=name, email=email, password_hash=password_hash))
