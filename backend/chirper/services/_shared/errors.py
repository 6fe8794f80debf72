"""
Domain-level error taxonomy used within the service layer.

Every business-rule failure is a :class:`ServiceError` tagged with one member
of the closed :class:`ErrorKind` enum. The kind fixes both the stable wire name
and the HTTP status, so the delivery layer dispatches on ``error.kind`` and
never on exception subclasses.

These errors are **framework-agnostic** and never import Flask. The
translation to HTTP responses is handled by ``chirper/core/errors.py``.
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL and MySQL include the constraint name in the driver message.
    SQLite only reports the offending columns, so ``UNIQUE`` failures on the
    constraint's column are matched as well.

    :param exc: The exception raised by SQLAlchemy during flush/commit.
    :param constraint_name: Constraint to match (e.g. ``"uq_users_email"``).
    :returns: ``True`` if the IntegrityError matches the given constraint.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    if constraint_name.lower() in message:
        return True
    # sqlite: "UNIQUE constraint failed: users.email"
    parts = constraint_name.lower().split("_", 2)
    if len(parts) == 3 and parts[0] == "uq":
        return f"unique constraint failed: {parts[1]}.{parts[2]}" in message
    return False


class ErrorKind(Enum):
    """Closed set of failure kinds, each with its wire name and HTTP status."""

    INVALID_MESSAGE = ("ERR_INVALID_MESSAGE", HTTPStatus.BAD_REQUEST)
    INVALID_EMAIL = ("ERR_INVALID_EMAIL", HTTPStatus.BAD_REQUEST)
    INVALID_PASSWORD = ("ERR_INVALID_PASSWORD", HTTPStatus.BAD_REQUEST)
    INVALID_NAME = ("ERR_INVALID_NAME", HTTPStatus.BAD_REQUEST)
    INVALID_CREDS = ("ERR_INVALID_CREDS", HTTPStatus.UNAUTHORIZED)
    INVALID_ACCESS_TOKEN = ("ERR_INVALID_ACCESS_TOKEN", HTTPStatus.UNAUTHORIZED)
    INVALID_REFRESH_TOKEN = ("ERR_INVALID_REFRESH_TOKEN", HTTPStatus.UNAUTHORIZED)
    EMAIL_ALREADY_REGISTERED = ("ERR_EMAIL_ALREADY_REGISTERED", HTTPStatus.CONFLICT)
    FORBIDDEN_ACCESS = ("ERR_FORBIDDEN_ACCESS", HTTPStatus.FORBIDDEN)
    NOT_FOUND = ("ERR_NOT_FOUND", HTTPStatus.NOT_FOUND)
    INTERNAL_SERVER = ("ERR_INTERNAL_SERVER", HTTPStatus.INTERNAL_SERVER_ERROR)

    def __init__(self, wire_name: str, status: HTTPStatus) -> None:
        self.wire_name = wire_name
        self.status = status


# Default human messages, kept stable for clients.
DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_MESSAGE: "the message should between 10 and 250 characters",
    ErrorKind.INVALID_EMAIL: "invalid email format",
    ErrorKind.INVALID_PASSWORD: "Password must be between 8 and 40 characters long",
    ErrorKind.INVALID_NAME: "Name must be between 3 and 60 characters long",
    ErrorKind.INVALID_CREDS: "incorrect email or password",
    ErrorKind.INVALID_ACCESS_TOKEN: "invalid access token",
    ErrorKind.INVALID_REFRESH_TOKEN: "invalid refresh token",
    ErrorKind.EMAIL_ALREADY_REGISTERED: "given email is already registered",
    ErrorKind.FORBIDDEN_ACCESS: "user don't have authorization to access this resource",
    ErrorKind.NOT_FOUND: "resource is not found",
    ErrorKind.INTERNAL_SERVER: "internal server error",
}


class ServiceError(Exception):
    """
    The single service-level exception type.

    :param kind: Failure kind; decides wire name and HTTP status.
    :param message: Human-readable explanation safe for clients. Defaults to
        the kind's stable message.

    Notes
    -----
    - These are *not* HTTP errors; they can be raised from services, ports and
      adapters alike.
    - Raised at the point of detection and propagated unchanged to the
      boundary (no local recovery).
    """

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return int(self.kind.status)

    def __repr__(self) -> str:
        return f"ServiceError({self.kind.name}, {self.message!r})"
