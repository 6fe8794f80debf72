from __future__ import annotations

from dataclasses import dataclass

from chirper.core.extensions import db
from chirper.repositories.refresh_token import RefreshTokenRepository
from chirper.services._shared.ports import RefreshTokenStore


@dataclass(slots=True)
class SQLRefreshTokenStore(RefreshTokenStore):
    """Refresh token records kept in the ``refresh_tokens`` table."""

    repo: RefreshTokenRepository

    @classmethod
    def from_session(cls) -> SQLRefreshTokenStore:
        return cls(repo=RefreshTokenRepository())

    def save_refresh_token(self, user_id: int, token: str) -> None:
        try:
            self.repo.record(user_id=user_id, token=token)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def is_refresh_token_valid(self, user_id: int, token: str) -> bool:
        return self.repo.exists_for_user(user_id=user_id, token=token)
