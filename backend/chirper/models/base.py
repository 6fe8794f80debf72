"""Reusable SQLAlchemy mixins shared by models (typed 2.0)."""

from __future__ import annotations

import time

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column


def unix_now() -> int:
    """Current time as integer unix seconds."""
    return int(time.time())


class UnixTimestampMixin:
    """Provide ``created_at`` and ``updated_at`` as unix-second integers.

    Attributes
    ----------
    created_at:
        Seconds since the epoch, filled on insert.
    updated_at:
        Seconds since the epoch, refreshed on every ORM update.
    """

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=unix_now)
    updated_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=unix_now,
        onupdate=unix_now,
    )


class PKMixin:
    """Expose an integer surrogate primary key column named ``id``."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
