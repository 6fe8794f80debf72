"""Convenience exports for application schemas."""

from __future__ import annotations

from .chirp import AuthorSchema, ChirpDeletedSchema, ChirpInSchema, ChirpSchema
from .common import RequestSchema
from .session import AccessTokenSchema, LoginResponseSchema, LoginSchema, RegisterSchema, UserSchema

__all__ = [
    "RequestSchema",
    "LoginSchema",
    "RegisterSchema",
    "UserSchema",
    "LoginResponseSchema",
    "AccessTokenSchema",
    "ChirpInSchema",
    "ChirpSchema",
    "AuthorSchema",
    "ChirpDeletedSchema",
]
