# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass

import redis  # type: ignore[import-untyped]

from chirper.services._shared.ports import RefreshTokenStore


@dataclass(slots=True)
class RedisRefreshTokenStore(RefreshTokenStore):
    """
    Redis-backed refresh token records.

    One set per user holds every refresh token still honoured for them.
    Keys carry no TTL because refresh tokens have no encoded expiry.

    :param r: A Redis client (already connected).
    :param prefix: Key namespace.
    """

    r: redis.Redis
    prefix: str = "rt:u:"

    def _ku(self, user_id: int) -> str:
        return f"{self.prefix}{user_id}"

    def save_refresh_token(self, user_id: int, token: str) -> None:
        self.r.sadd(self._ku(user_id), token)

    def is_refresh_token_valid(self, user_id: int, token: str) -> bool:
        return bool(self.r.sismember(self._ku(user_id), token))
