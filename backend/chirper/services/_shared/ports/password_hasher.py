from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """One-way hash + compare for passwords."""

    def hash_password(self, password: str) -> str: ...

    def compare_password(self, password: str, password_hash: str) -> bool: ...


class PlainPasswordHasher(PasswordHasher):
    """Reversible marker "hash" for unit tests. Never use outside tests."""

    PREFIX = "plain$"

    def hash_password(self, password: str) -> str:
        return f"{self.PREFIX}{password}"

    def compare_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"{self.PREFIX}{password}"
