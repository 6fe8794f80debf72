"""Refresh token record repository."""

from __future__ import annotations

from sqlalchemy import select

from chirper.models.refresh_token import RefreshToken
from chirper.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    model = RefreshToken

    def record(self, *, user_id: int, token: str) -> RefreshToken:
        return self.add(RefreshToken(user_id=user_id, token=token))

    def exists_for_user(self, *, user_id: int, token: str) -> bool:
        """Return ``True`` when ``token`` is recorded for ``user_id``."""
        stmt = (
            select(RefreshToken.id)
            .where(RefreshToken.user_id == user_id, RefreshToken.token == token)
            .limit(1)
        )
        return self.session.execute(stmt).first() is not None
