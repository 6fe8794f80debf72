from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from chirper.core.extensions import db
from chirper.models.user import User
from chirper.repositories.user import UserRepository
from chirper.services._shared.errors import violates
from chirper.services._shared.ports import DuplicateEmailError, UserRecord, UserStore


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        name=user.name,
        email=user.email,
        password_hash=user.password_hash,
    )


@dataclass(slots=True)
class SQLUserStore(UserStore):
    """
    SQLAlchemy-backed user store; each write commits on its own.

    :param repo: Repository bound to the Flask-scoped session.
    """

    repo: UserRepository

    @classmethod
    def from_session(cls) -> SQLUserStore:
        return cls(repo=UserRepository())

    def get_user_by_email(self, email: str) -> UserRecord | None:
        user = self.repo.get_by_email(email)
        return _to_record(user) if user else None

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        try:
            user = self.repo.create(name=name, email=email, password_hash=password_hash)
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            if violates(exc, "uq_users_email"):
                raise DuplicateEmailError(email) from exc
            raise
        return _to_record(user)
