"""Chirp service exposing CRUD with ownership checks."""

from __future__ import annotations

from .dto import ActingUser, AuthorOut, ChirpOut
from .service import ChirpService

__all__ = ["ChirpService", "ActingUser", "AuthorOut", "ChirpOut"]
