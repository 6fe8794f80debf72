from __future__ import annotations

from chirper.services._shared.ports.chirp_store import ChirpRow

from .dto import AuthorOut, ChirpOut


def chirp_row_to_out(row: ChirpRow) -> ChirpOut:
    return ChirpOut(
        id=row.id,
        message=row.message,
        author=AuthorOut(id=row.user_id, name=row.name, email=row.email),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
