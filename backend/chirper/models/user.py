"""User model definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirper.core.extensions import db

from .base import PKMixin, ReprMixin, UnixTimestampMixin

if TYPE_CHECKING:
    from .chirp import Chirp
    from .refresh_token import RefreshToken


class User(PKMixin, ReprMixin, UnixTimestampMixin, db.Model):
    """
    Authentication identity and chirp author.

    Fields
    ------
    name : str
        Display name shown next to chirps (3-60 chars).
    email : str
        Login email, unique per system.
    password_hash : str
        Opaque credential hash; the raw password is never stored.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(60), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    chirps: Mapped[list[Chirp]] = relationship(
        back_populates="author", cascade="all, delete-orphan", passive_deletes=True
    )
    refresh_tokens: Mapped[list[RefreshToken]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)
