from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ActingUser:
    """
    Authenticated identity resolved from an access token.

    :param id: User id.
    :param email: Email carried by the token.
    """

    id: int
    email: str


@dataclass(frozen=True, slots=True)
class AuthorOut:
    id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class ChirpOut:
    """
    Chirp view returned by every chirp operation.

    :param id: Chirp id.
    :param message: Stored message.
    :param author: Public identity of the author.
    :param created_at: Unix seconds at creation.
    :param updated_at: Unix seconds at last edit.
    """

    id: int
    message: str
    author: AuthorOut
    created_at: int
    updated_at: int
