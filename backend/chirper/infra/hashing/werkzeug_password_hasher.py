from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from chirper.services._shared.ports import PasswordHasher


@dataclass(slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Salted one-way hashing via :mod:`werkzeug.security`.

    :param method: Method string for ``generate_password_hash``
        (e.g. ``"scrypt"`` or ``"pbkdf2:sha256:600000"``).
    """

    method: str = "scrypt"

    def hash_password(self, password: str) -> str:
        return generate_password_hash(password, method=self.method)

    def compare_password(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        # ``check_password_hash`` is loosely typed; coerce to bool for mypy.
        return bool(check_password_hash(password_hash, password))
