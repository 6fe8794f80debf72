"""Shared API helpers: bearer tokens, access control and service wiring."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from chirper.core.extensions import get_redis
from chirper.infra.hashing.werkzeug_password_hasher import WerkzeugPasswordHasher
from chirper.infra.jwt.pyjwt_token_issuer import PyJWTTokenIssuer
from chirper.infra.redis.redis_refresh_token_store import RedisRefreshTokenStore
from chirper.infra.sql.chirp_store import SQLChirpStore
from chirper.infra.sql.refresh_token_store import SQLRefreshTokenStore
from chirper.infra.sql.user_store import SQLUserStore
from chirper.services import ActingUser, ChirpService, ErrorKind, ServiceError, SessionService
from chirper.services._shared.ports import RefreshTokenStore, TokenIssuer

F = TypeVar("F", bound=Callable[..., Any])

BEARER_SCHEME = "bearer"


# ------------------------------ Bearer tokens --------------------------------


def extract_bearer_token(header: str | None) -> str | None:
    """
    Return the token from an ``Authorization: Bearer <token>`` header.

    The scheme is matched case-insensitively. Anything else (missing header,
    other scheme, empty token) yields ``None``.
    """
    if not header:
        return None
    parts = header.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    token = parts[1].strip()
    return token or None


def request_bearer_token() -> str | None:
    return extract_bearer_token(request.headers.get("Authorization"))


# ------------------------------ Service wiring -------------------------------


def build_token_issuer() -> TokenIssuer:
    cfg = current_app.config
    return PyJWTTokenIssuer(
        access_secret=cfg["ACCESS_TOKEN_SECRET"],
        refresh_secret=cfg["REFRESH_TOKEN_SECRET"],
        algorithm=cfg.get("JWT_ALGORITHM", "HS256"),
    )


def build_refresh_store() -> RefreshTokenStore:
    """Pick the refresh-token backend selected by ``REFRESH_TOKEN_BACKEND``."""
    backend = str(current_app.config.get("REFRESH_TOKEN_BACKEND", "sql")).lower()
    if backend == "redis":
        return RedisRefreshTokenStore(r=get_redis())
    return SQLRefreshTokenStore.from_session()


def build_session_service() -> SessionService:
    cfg = current_app.config
    return SessionService(
        user_store=SQLUserStore.from_session(),
        refresh_store=build_refresh_store(),
        hasher=WerkzeugPasswordHasher(method=cfg.get("PASSWORD_HASH_METHOD", "scrypt")),
        tokens=build_token_issuer(),
        access_ttl=timedelta(seconds=int(cfg.get("ACCESS_TOKEN_TTL_SECONDS", 300))),
    )


def build_chirp_service() -> ChirpService:
    return ChirpService(chirp_store=SQLChirpStore.from_session())


# ------------------------------ Access control -------------------------------


def authenticate_access_token() -> None:
    """
    ``before_request`` gate for protected blueprints.

    Resolves the bearer access token into ``g.identity``.

    :raises ServiceError: ``INVALID_ACCESS_TOKEN`` when the token is missing
        or does not verify; ``INTERNAL_SERVER`` for unexpected verifier faults.
    """
    token = request_bearer_token()
    if token is None:
        raise ServiceError(ErrorKind.INVALID_ACCESS_TOKEN)
    try:
        claims = build_token_issuer().verify_access_token(token)
    except ServiceError:
        raise
    except Exception as exc:
        raise ServiceError(ErrorKind.INTERNAL_SERVER) from exc
    g.identity = ActingUser(id=claims.user_id, email=claims.email)


def current_identity() -> ActingUser:
    return cast(ActingUser, g.identity)


# ------------------------------ Responses ------------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def json_body() -> Any:
    """Parsed JSON body, or ``{}`` when absent or malformed."""
    data = request.get_json(silent=True)
    return {} if data is None else data


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
