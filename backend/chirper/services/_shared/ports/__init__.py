"""
chirper.services._shared.ports
==============================

Collection of *ports* (hexagonal interfaces) the services depend on.

Modules
-------
- :mod:`token_issuer`:
    :class:`~.TokenIssuer` signs and verifies access and refresh tokens.
- :mod:`password_hasher`:
    :class:`~.PasswordHasher` hashes and compares passwords.
- :mod:`user_store`:
    :class:`~.UserStore` persists users and reports email conflicts.
- :mod:`refresh_token_store`:
    :class:`~.RefreshTokenStore` records refresh tokens still honoured.
- :mod:`chirp_store`:
    :class:`~.ChirpStore` persists chirps with owner linkage.

Design Notes
------------
Each port ships with an in-memory double next to it. Concrete adapters
(PyJWT, werkzeug, SQLAlchemy, Redis) live under ``chirper.infra``.
"""

from __future__ import annotations

from .chirp_store import ChirpOwnerRow, ChirpRow, ChirpStore, InMemoryChirpStore
from .password_hasher import PasswordHasher, PlainPasswordHasher
from .refresh_token_store import InMemoryRefreshTokenStore, RefreshTokenStore
from .token_issuer import StubTokenIssuer, TokenClaims, TokenIssuer
from .user_store import DuplicateEmailError, InMemoryUserStore, UserRecord, UserStore

__all__ = [
    "ChirpOwnerRow",
    "ChirpRow",
    "ChirpStore",
    "InMemoryChirpStore",
    "PasswordHasher",
    "PlainPasswordHasher",
    "RefreshTokenStore",
    "InMemoryRefreshTokenStore",
    "TokenClaims",
    "TokenIssuer",
    "StubTokenIssuer",
    "DuplicateEmailError",
    "InMemoryUserStore",
    "UserRecord",
    "UserStore",
]
