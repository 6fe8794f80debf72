from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

from chirper.services._shared.errors import ErrorKind, ServiceError


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """
    Identity carried inside a signed token. Never persisted.

    :ivar user_id: Owner user id.
    :ivar email: Owner email at issuance time.
    """

    user_id: int
    email: str


class TokenIssuer(Protocol):
    """
    Port for signing and verifying the two token kinds.

    Access and refresh tokens are signed with independent secrets: a token of
    one kind MUST never verify as the other.
    """

    def issue_access_token(self, user_id: int, email: str, ttl: timedelta) -> str: ...

    def issue_refresh_token(self, user_id: int, email: str) -> str:
        """Issue a refresh token. No expiry is encoded."""

    def verify_access_token(self, token: str) -> TokenClaims:
        """
        Decode an access token.

        :raises ServiceError: ``INVALID_ACCESS_TOKEN`` on any malformed,
            expired or wrongly-signed token.
        """

    def verify_refresh_token(self, token: str) -> TokenClaims:
        """
        Decode a refresh token.

        :raises ServiceError: ``INVALID_REFRESH_TOKEN`` on any malformed or
            wrongly-signed token.
        """


class StubTokenIssuer(TokenIssuer):
    """Deterministic token issuer used in unit tests."""

    def __init__(self) -> None:
        self._seq = 0
        self._issued: dict[str, tuple[str, TokenClaims]] = {}
        self.last_ttl: timedelta | None = None

    def _mk(self, kind: str, user_id: int, email: str) -> str:
        self._seq += 1
        token = f"{kind}.{user_id}.{self._seq}"
        self._issued[token] = (kind, TokenClaims(user_id=user_id, email=email))
        return token

    def _verify(self, token: str, kind: str, error: ErrorKind) -> TokenClaims:
        entry = self._issued.get(token)
        if entry is None or entry[0] != kind:
            raise ServiceError(error)
        return entry[1]

    def issue_access_token(self, user_id: int, email: str, ttl: timedelta) -> str:
        self.last_ttl = ttl
        return self._mk("access", user_id, email)

    def issue_refresh_token(self, user_id: int, email: str) -> str:
        return self._mk("refresh", user_id, email)

    def verify_access_token(self, token: str) -> TokenClaims:
        return self._verify(token, "access", ErrorKind.INVALID_ACCESS_TOKEN)

    def verify_refresh_token(self, token: str) -> TokenClaims:
        return self._verify(token, "refresh", ErrorKind.INVALID_REFRESH_TOKEN)
