"""Chirp repository with author-joined reads."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import joinedload

from chirper.models.base import unix_now
from chirper.models.chirp import Chirp
from chirper.repositories.base import BaseRepository


class ChirpRepository(BaseRepository[Chirp]):
    """Persistence-only repository for :class:`Chirp`.

    Reads join the author so a chirp view is built without N+1 queries.
    """

    model = Chirp

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(joinedload(Chirp.author))

    def create(self, *, user_id: int, message: str) -> Chirp:
        return self.add(Chirp(user_id=user_id, message=message))

    def list_recent(self, limit: int) -> list[Chirp]:
        """Newest first; ``id`` breaks ties within the same second."""
        stmt = self._default_eagerload(
            select(Chirp).order_by(Chirp.created_at.desc(), Chirp.id.desc()).limit(limit)
        )
        return list(self.session.execute(stmt).scalars().all())

    def is_author(self, *, user_id: int, chirp_id: int) -> bool:
        stmt = select(Chirp.id).where(Chirp.id == chirp_id, Chirp.user_id == user_id).limit(1)
        return self.session.execute(stmt).first() is not None

    def get_owner(self, chirp_id: int) -> tuple[int, int] | None:
        """Return ``(id, user_id)`` or ``None`` when absent."""
        row = self.session.execute(
            select(Chirp.id, Chirp.user_id).where(Chirp.id == chirp_id)
        ).first()
        return (row.id, row.user_id) if row else None

    def update_message(self, chirp_id: int, message: str) -> bool:
        """
        Set a new message and stamp ``updated_at``, even when the text is
        unchanged. ``False`` if absent.
        """
        chirp = self.session.get(Chirp, chirp_id)
        if chirp is None:
            return False
        chirp.message = message
        chirp.updated_at = unix_now()
        self.flush()
        return True

    def delete_owned(self, *, chirp_id: int, user_id: int) -> bool:
        """Delete a chirp only if owned by ``user_id``."""
        chirp = self.session.execute(
            select(Chirp).where(Chirp.id == chirp_id, Chirp.user_id == user_id)
        ).scalar_one_or_none()
        if chirp is None:
            return False
        self.delete(chirp)
        return True
