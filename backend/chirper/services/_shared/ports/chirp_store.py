from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ChirpRow:
    """
    Chirp joined with its author's public identity.

    :ivar id: Chirp id.
    :ivar message: Stored message.
    :ivar created_at: Unix seconds at creation.
    :ivar updated_at: Unix seconds at last edit.
    :ivar user_id: Author id.
    :ivar name: Author display name.
    :ivar email: Author email.
    """

    id: int
    message: str
    created_at: int
    updated_at: int
    user_id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class ChirpOwnerRow:
    """Minimal existence + owner record used before deletion."""

    id: int
    user_id: int


class ChirpStore(Protocol):
    """
    Persistence port for chirps.

    Every method is an independent round trip; callers MUST NOT assume a
    transaction spans two calls.
    """

    def create_chirp(self, user_id: int, message: str) -> int:
        """Insert a chirp and return its new id."""

    def get_chirps(self, limit: int) -> list[ChirpRow]:
        """Return up to ``limit`` chirps, newest first."""

    def get_chirp_with_author(self, chirp_id: int) -> ChirpRow | None: ...

    def is_user_the_author(self, user_id: int, chirp_id: int) -> bool:
        """``False`` both for foreign chirps and for chirps that do not exist."""

    def update_chirp(self, chirp_id: int, message: str) -> None: ...

    def get_chirp_owner(self, chirp_id: int) -> ChirpOwnerRow | None: ...

    def delete_chirp(self, chirp_id: int, user_id: int) -> None:
        """Delete a chirp, scoped to its owner."""


@dataclass
class _Chirp:
    id: int
    user_id: int
    message: str
    created_at: int
    updated_at: int


class InMemoryChirpStore(ChirpStore):
    """
    List-backed chirp store for unit tests.

    Authors are registered up front with :meth:`add_author` so joined rows can
    be produced. ``calls`` records the order of store operations.
    """

    def __init__(self) -> None:
        self._chirps: dict[int, _Chirp] = {}
        self._authors: dict[int, tuple[str, str]] = {}
        self._seq = 0
        self.calls: list[str] = []

    def add_author(self, user_id: int, name: str, email: str) -> None:
        self._authors[user_id] = (name, email)

    def _row(self, chirp: _Chirp) -> ChirpRow | None:
        author = self._authors.get(chirp.user_id)
        if author is None:
            return None
        return ChirpRow(
            id=chirp.id,
            message=chirp.message,
            created_at=chirp.created_at,
            updated_at=chirp.updated_at,
            user_id=chirp.user_id,
            name=author[0],
            email=author[1],
        )

    def create_chirp(self, user_id: int, message: str) -> int:
        self.calls.append("create_chirp")
        self._seq += 1
        now = int(time.time())
        self._chirps[self._seq] = _Chirp(self._seq, user_id, message, now, now)
        return self._seq

    def get_chirps(self, limit: int) -> list[ChirpRow]:
        self.calls.append("get_chirps")
        ordered = sorted(self._chirps.values(), key=lambda c: (c.created_at, c.id), reverse=True)
        rows = [self._row(c) for c in ordered]
        return [r for r in rows if r is not None][:limit]

    def get_chirp_with_author(self, chirp_id: int) -> ChirpRow | None:
        self.calls.append("get_chirp_with_author")
        chirp = self._chirps.get(chirp_id)
        return self._row(chirp) if chirp else None

    def is_user_the_author(self, user_id: int, chirp_id: int) -> bool:
        self.calls.append("is_user_the_author")
        chirp = self._chirps.get(chirp_id)
        return chirp is not None and chirp.user_id == user_id

    def update_chirp(self, chirp_id: int, message: str) -> None:
        self.calls.append("update_chirp")
        chirp = self._chirps.get(chirp_id)
        if chirp:
            chirp.message = message
            chirp.updated_at = int(time.time())

    def get_chirp_owner(self, chirp_id: int) -> ChirpOwnerRow | None:
        self.calls.append("get_chirp_owner")
        chirp = self._chirps.get(chirp_id)
        return ChirpOwnerRow(id=chirp.id, user_id=chirp.user_id) if chirp else None

    def delete_chirp(self, chirp_id: int, user_id: int) -> None:
        self.calls.append("delete_chirp")
        chirp = self._chirps.get(chirp_id)
        if chirp and chirp.user_id == user_id:
            del self._chirps[chirp_id]
