"""Chirp model: a short post owned by exactly one user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirper.core.extensions import db

from .base import PKMixin, ReprMixin, UnixTimestampMixin

if TYPE_CHECKING:
    from .user import User


class Chirp(PKMixin, ReprMixin, UnixTimestampMixin, db.Model):
    """
    Authored text post.

    Fields
    ------
    user_id : int
        Author, fixed at creation.
    message : str
        Trimmed message, 10-250 chars (validated by the service layer).
    """

    __tablename__ = "chirps"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    message: Mapped[str] = mapped_column(String(250), nullable=False)

    author: Mapped[User] = relationship(back_populates="chirps")

    __table_args__ = (
        Index("ix_chirps_user_id", "user_id"),
        Index("ix_chirps_created_at", "created_at"),
    )
