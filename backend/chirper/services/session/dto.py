# chirper/services/session/dto.py
from __future__ import annotations

from dataclasses import dataclass

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email, as submitted.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for registration.

    :param name: Display name (3-60 chars).
    :param email: Login email.
    :param password: Raw password (8-40 chars), hashed before storage.
    """

    name: str
    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """Public-safe user profile."""

    id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Output DTO for a successful login.

    :param id: User id.
    :param email: User email.
    :param name: User display name.
    :param access_token: Short-lived access JWT.
    :param refresh_token: Long-lived refresh JWT, recorded server-side.
    """

    id: int
    email: str
    name: str
    access_token: str
    refresh_token: str
