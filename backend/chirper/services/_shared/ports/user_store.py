from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class DuplicateEmailError(Exception):
    """Raised by a :class:`UserStore` when the email is already taken."""


@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    Read-model for a stored user.

    :ivar id: Primary key.
    :ivar name: Display name.
    :ivar email: Unique login email.
    :ivar password_hash: Opaque credential hash.
    """

    id: int
    name: str
    email: str
    password_hash: str


class UserStore(Protocol):
    """
    Persistence port for users.

    Email uniqueness is enforced by the store itself; a conflicting insert
    MUST surface as :class:`DuplicateEmailError` and nothing else.
    """

    def get_user_by_email(self, email: str) -> UserRecord | None: ...

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """
        Insert a new user.

        :raises DuplicateEmailError: If ``email`` is already registered.
        """


class InMemoryUserStore(UserStore):
    """Dictionary-backed user store for unit tests."""

    def __init__(self) -> None:
        self._by_email: dict[str, UserRecord] = {}
        self._seq = 0
        self.calls: list[str] = []

    def add(self, record: UserRecord) -> None:
        self._by_email[record.email] = record
        self._seq = max(self._seq, record.id)

    def get_user_by_email(self, email: str) -> UserRecord | None:
        self.calls.append("get_user_by_email")
        return self._by_email.get(email)

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        self.calls.append("create_user")
        if email in self._by_email:
            raise DuplicateEmailError(email)
        self._seq += 1
        record = UserRecord(id=self._seq, name=name, email=email, password_hash=password_hash)
        self._by_email[email] = record
        return record
