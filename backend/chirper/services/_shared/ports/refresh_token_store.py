from __future__ import annotations

import threading
from typing import Protocol


class RefreshTokenStore(Protocol):
    """
    Server-side record of issued refresh tokens.

    A refresh token only grants new access tokens while it is recorded here,
    which keeps room for revocation without changing the session contract.
    Several tokens per user may coexist; nothing is rotated or pruned.
    """

    def save_refresh_token(self, user_id: int, token: str) -> None:
        """
        Record ``token`` as valid for ``user_id``.

        This MUST be executed *before* the token is handed to the client.
        """

    def is_refresh_token_valid(self, user_id: int, token: str) -> bool:
        """Return ``True`` if ``token`` is recorded for ``user_id``."""


class InMemoryRefreshTokenStore(RefreshTokenStore):
    """
    In-memory refresh token store.

    .. note::
       Uses a threading lock so concurrent test clients see consistent sets.
    """

    def __init__(self) -> None:
        self._by_user: dict[int, set[str]] = {}
        self._lock = threading.Lock()

    def save_refresh_token(self, user_id: int, token: str) -> None:
        with self._lock:
            self._by_user.setdefault(user_id, set()).add(token)

    def is_refresh_token_valid(self, user_id: int, token: str) -> bool:
        with self._lock:
            return token in self._by_user.get(user_id, set())

    def count_for_user(self, user_id: int) -> int:
        with self._lock:
            return len(self._by_user.get(user_id, set()))
