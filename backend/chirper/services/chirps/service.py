# chirper/services/chirps/service.py
from __future__ import annotations

import logging

from chirper.services._shared.base import BaseService
from chirper.services._shared.errors import ErrorKind, ServiceError
from chirper.services._shared.ports.chirp_store import ChirpStore

from ._converters import chirp_row_to_out
from .dto import ActingUser, ChirpOut

logger = logging.getLogger(__name__)

MESSAGE_LENGTH = (10, 250)
LIST_LIMIT = 100
BLANK_MESSAGE = "the message must not empty"


class ChirpService(BaseService):
    """
    Chirp lifecycle with ownership-based authorization.

    Ordering notes
    --------------
    - ``edit_chirp`` checks authorship *before* existence, so editing a
      missing chirp reports ``FORBIDDEN_ACCESS``.
    - ``delete_chirp`` checks existence first, then ownership.
    - Ownership check and mutation are separate store round trips.
    """

    def __init__(self, *, chirp_store: ChirpStore) -> None:
        self.chirps = chirp_store

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create_chirp(self, user: ActingUser, message: str) -> ChirpOut:
        """
        Persist a chirp authored by ``user``.

        :raises ServiceError: ``INVALID_MESSAGE`` before any store call, or
            ``NOT_FOUND`` if the new row cannot be read back.
        """
        message = self._check_message(message)
        chirp_id = self.chirps.create_chirp(user.id, message)
        row = self.chirps.get_chirp_with_author(chirp_id)
        if row is None:
            logger.error("created chirp not readable", extra={"chirp_id": chirp_id})
            raise ServiceError(ErrorKind.NOT_FOUND)
        logger.info("chirp created", extra={"chirp_id": chirp_id, "user_id": user.id})
        return chirp_row_to_out(row)

    def edit_chirp(self, user: ActingUser, chirp_id: int, message: str) -> ChirpOut:
        """
        Replace the message of a chirp owned by ``user``.

        :raises ServiceError: ``INVALID_MESSAGE``, ``FORBIDDEN_ACCESS`` (also
            for chirps that do not exist) or ``NOT_FOUND``.
        """
        message = self._check_message(message)
        if not self.chirps.is_user_the_author(user.id, chirp_id):
            raise ServiceError(ErrorKind.FORBIDDEN_ACCESS)
        self.chirps.update_chirp(chirp_id, message)
        row = self.chirps.get_chirp_with_author(chirp_id)
        if row is None:
            raise ServiceError(ErrorKind.NOT_FOUND)
        logger.info("chirp edited", extra={"chirp_id": chirp_id, "user_id": user.id})
        return chirp_row_to_out(row)

    def delete_chirp(self, user: ActingUser, chirp_id: int) -> None:
        """
        Delete a chirp owned by ``user``.

        :raises ServiceError: ``NOT_FOUND`` if absent, ``FORBIDDEN_ACCESS`` if
            owned by someone else.
        """
        owner = self.chirps.get_chirp_owner(chirp_id)
        if owner is None:
            raise ServiceError(ErrorKind.NOT_FOUND)
        self.ensure_owner(user.id, owner.user_id)
        self.chirps.delete_chirp(chirp_id, user.id)
        logger.info("chirp deleted", extra={"chirp_id": chirp_id, "user_id": user.id})

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def get_chirp_list(self) -> list[ChirpOut]:
        """Most recent chirps system-wide, newest first. Empty store yields ``[]``."""
        rows = self.chirps.get_chirps(LIST_LIMIT)
        logger.debug("chirps listed", extra={"count": len(rows)})
        return [chirp_row_to_out(r) for r in rows]

    def get_one_chirp(self, chirp_id: int) -> ChirpOut:
        row = self.chirps.get_chirp_with_author(chirp_id)
        if row is None:
            raise ServiceError(ErrorKind.NOT_FOUND)
        return chirp_row_to_out(row)

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def _check_message(self, message: str) -> str:
        """Return the trimmed message or fail with ``INVALID_MESSAGE``."""
        trimmed = message.strip()
        if not trimmed:
            raise ServiceError(ErrorKind.INVALID_MESSAGE, BLANK_MESSAGE)
        low, high = MESSAGE_LENGTH
        self.ensure_length(trimmed, low=low, high=high, kind=ErrorKind.INVALID_MESSAGE)
        return trimmed
