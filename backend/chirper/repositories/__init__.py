"""Repository package exposing persistence-layer access for all models."""

from __future__ import annotations

from chirper.repositories.base import BaseRepository
from chirper.repositories.chirp import ChirpRepository
from chirper.repositories.refresh_token import RefreshTokenRepository
from chirper.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ChirpRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
