# chirper/infra/jwt/pyjwt_token_issuer.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt as pyjwt

from chirper.services._shared.errors import ErrorKind, ServiceError
from chirper.services._shared.ports import TokenClaims, TokenIssuer

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


@dataclass(slots=True)
class PyJWTTokenIssuer(TokenIssuer):
    """
    Adapter over PyJWT signing two token kinds with independent secrets.

    :param access_secret: HMAC secret for access tokens.
    :param refresh_secret: HMAC secret for refresh tokens.
    :param algorithm: JWS algorithm (``HS256`` by default).

    .. note::
       Tokens also carry a ``type`` claim, so a token signed with the wrong
       kind's secret fails twice over.
    """

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"

    # -------------------- issue ------------------------

    def _payload(self, user_id: int, email: str, token_type: str) -> dict[str, Any]:
        return {
            "sub": str(user_id),
            "email": email,
            "type": token_type,
            "iat": datetime.now(UTC),
        }

    def issue_access_token(self, user_id: int, email: str, ttl: timedelta) -> str:
        payload = self._payload(user_id, email, ACCESS_TOKEN_TYPE)
        payload["exp"] = payload["iat"] + ttl
        return pyjwt.encode(payload, self.access_secret, algorithm=self.algorithm)

    def issue_refresh_token(self, user_id: int, email: str) -> str:
        payload = self._payload(user_id, email, REFRESH_TOKEN_TYPE)
        # jti keeps tokens issued within the same second distinct
        payload["jti"] = uuid4().hex
        return pyjwt.encode(payload, self.refresh_secret, algorithm=self.algorithm)

    # -------------------- verify -----------------------

    def verify_access_token(self, token: str) -> TokenClaims:
        return self._verify(
            token, self.access_secret, ACCESS_TOKEN_TYPE, ErrorKind.INVALID_ACCESS_TOKEN
        )

    def verify_refresh_token(self, token: str) -> TokenClaims:
        return self._verify(
            token, self.refresh_secret, REFRESH_TOKEN_TYPE, ErrorKind.INVALID_REFRESH_TOKEN
        )

    def _verify(self, token: str, secret: str, token_type: str, kind: ErrorKind) -> TokenClaims:
        """
        Decode ``token`` and map every verification failure to ``kind``.

        :raises ServiceError: ``kind`` on malformed, expired, wrongly signed or
            wrongly typed tokens; ``INTERNAL_SERVER`` on anything unexpected.
        """
        try:
            payload = pyjwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "iat"]},
            )
        except pyjwt.InvalidTokenError as exc:
            raise ServiceError(kind) from exc
        except Exception as exc:
            logger.exception("token verification failed unexpectedly")
            raise ServiceError(ErrorKind.INTERNAL_SERVER) from exc

        if payload.get("type") != token_type:
            raise ServiceError(kind)
        email = payload.get("email")
        if not isinstance(email, str):
            raise ServiceError(kind)
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise ServiceError(kind) from exc
        return TokenClaims(user_id=user_id, email=email)
