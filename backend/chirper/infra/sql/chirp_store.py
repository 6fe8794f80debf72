from __future__ import annotations

from dataclasses import dataclass

from chirper.core.extensions import db
from chirper.models.chirp import Chirp
from chirper.repositories.chirp import ChirpRepository
from chirper.services._shared.ports import ChirpOwnerRow, ChirpRow, ChirpStore


def _to_row(chirp: Chirp) -> ChirpRow:
    return ChirpRow(
        id=chirp.id,
        message=chirp.message,
        created_at=chirp.created_at,
        updated_at=chirp.updated_at,
        user_id=chirp.author.id,
        name=chirp.author.name,
        email=chirp.author.email,
    )


@dataclass(slots=True)
class SQLChirpStore(ChirpStore):
    """
    SQLAlchemy-backed chirp store.

    Every write is its own transaction. No transaction spans an ownership
    check and the following mutation.
    """

    repo: ChirpRepository

    @classmethod
    def from_session(cls) -> SQLChirpStore:
        return cls(repo=ChirpRepository())

    # -------------------- writes ---------------------

    def _commit(self) -> None:
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def create_chirp(self, user_id: int, message: str) -> int:
        chirp = self.repo.create(user_id=user_id, message=message)
        chirp_id = chirp.id
        self._commit()
        return chirp_id

    def update_chirp(self, chirp_id: int, message: str) -> None:
        self.repo.update_message(chirp_id, message)
        self._commit()

    def delete_chirp(self, chirp_id: int, user_id: int) -> None:
        self.repo.delete_owned(chirp_id=chirp_id, user_id=user_id)
        self._commit()

    # -------------------- reads ----------------------

    def get_chirps(self, limit: int) -> list[ChirpRow]:
        return [_to_row(c) for c in self.repo.list_recent(limit)]

    def get_chirp_with_author(self, chirp_id: int) -> ChirpRow | None:
        chirp = self.repo.get(chirp_id)
        return _to_row(chirp) if chirp else None

    def is_user_the_author(self, user_id: int, chirp_id: int) -> bool:
        return self.repo.is_author(user_id=user_id, chirp_id=chirp_id)

    def get_chirp_owner(self, chirp_id: int) -> ChirpOwnerRow | None:
        owner = self.repo.get_owner(chirp_id)
        if owner is None:
            return None
        return ChirpOwnerRow(id=owner[0], user_id=owner[1])
