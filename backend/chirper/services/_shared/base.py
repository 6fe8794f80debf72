# chirper/services/_shared/base.py
from __future__ import annotations

import re

from chirper.services._shared.errors import ErrorKind, ServiceError

# local-part@domain.tld, no embedded whitespace
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Matches the ``users.email`` column width
EMAIL_MAX_LENGTH = 254


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Offer shared validation and authorization helpers.
    * Keep services thin, orchestration-only, no web/ORM leakage.

    Notes
    -----
    - Collaborators (stores, hasher, token issuer) are injected by the
      subclass constructor; services never reach for globals.
    - Every helper raises :class:`ServiceError` at the point of detection.
    - Request correlation ids reach service logs through the logging filter,
      so services carry no request state of their own.
    """

    # ----------------------- Validation utilities ---------------------------

    @staticmethod
    def is_valid_email(email: str) -> bool:
        """Whole-string format check, bounded by the stored column width."""
        return len(email) <= EMAIL_MAX_LENGTH and EMAIL_PATTERN.fullmatch(email) is not None

    @staticmethod
    def ensure_length(value: str, *, low: int, high: int, kind: ErrorKind) -> None:
        """
        Fail with ``kind`` unless ``low <= len(value) <= high``.

        :raises ServiceError: With the given kind on violation.
        """
        if not low <= len(value) <= high:
            raise ServiceError(kind)

    # --------------------------- AuthZ --------------------------------------

    def ensure_owner(self, actor_id: int | None, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the current actor is the resource owner.

        :param actor_id: Authenticated user id.
        :param owner_id: Expected owner id.
        :param msg: Optional custom error message.
        :raises ServiceError: ``FORBIDDEN_ACCESS`` if actor is not the owner.
        """
        from chirper.services._shared.policies.common import is_owner

        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise ServiceError(ErrorKind.FORBIDDEN_ACCESS, msg)
