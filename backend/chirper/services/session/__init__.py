"""Session service: registration, login and access-token refresh."""

from __future__ import annotations

from .dto import LoginIn, LoginOut, RegisterIn, UserPublicOut
from .service import SessionService

__all__ = ["SessionService", "LoginIn", "LoginOut", "RegisterIn", "UserPublicOut"]
