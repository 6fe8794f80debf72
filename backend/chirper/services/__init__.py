"""Service layer public API.

Callers import from :mod:`chirper.services` without knowing internal
structure.

Re-exports
----------
- Base primitives (from ``chirper.services._shared.base``)
    * :class:`BaseService`

- Error taxonomy (from ``chirper.services._shared.errors``)
    * :class:`ErrorKind`
    * :class:`ServiceError`

- Session service (from ``chirper.services.session``)
    * :class:`SessionService`
    * DTOs: :class:`LoginIn`, :class:`RegisterIn`, :class:`LoginOut`,
      :class:`UserPublicOut`

- Chirp service (from ``chirper.services.chirps``)
    * :class:`ChirpService`
    * DTOs: :class:`ActingUser`, :class:`ChirpOut`, :class:`AuthorOut`
"""

from __future__ import annotations

from ._shared.base import BaseService
from ._shared.errors import ErrorKind, ServiceError
from .chirps import ActingUser, AuthorOut, ChirpOut, ChirpService
from .session import LoginIn, LoginOut, RegisterIn, SessionService, UserPublicOut

__all__ = [
    # Base
    "BaseService",
    "ErrorKind",
    "ServiceError",
    # Session
    "SessionService",
    "LoginIn",
    "LoginOut",
    "RegisterIn",
    "UserPublicOut",
    # Chirps
    "ChirpService",
    "ActingUser",
    "AuthorOut",
    "ChirpOut",
]
