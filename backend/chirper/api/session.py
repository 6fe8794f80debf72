"""Session endpoints: login and access-token refresh."""

from __future__ import annotations

from flask import Blueprint

from chirper.api.deps import (
    build_session_service,
    json_body,
    json_response,
    request_bearer_token,
    timing,
)
from chirper.schemas import AccessTokenSchema, LoginResponseSchema, LoginSchema
from chirper.services import ErrorKind, LoginIn, ServiceError

bp = Blueprint("session", __name__)

login_schema = LoginSchema()
login_response_schema = LoginResponseSchema()
access_token_schema = AccessTokenSchema()


@bp.post("")
@timing
def login():
    """Authenticate credentials and issue an access/refresh token pair."""

    data = login_schema.load_lenient(json_body())
    result = build_session_service().login(LoginIn(email=data["email"], password=data["password"]))
    return json_response(login_response_schema.dump(result))


@bp.put("")
@timing
def refresh():
    """Exchange the bearer refresh token for a new access token."""

    token = request_bearer_token()
    if token is None:
        raise ServiceError(ErrorKind.INVALID_REFRESH_TOKEN)
    access = build_session_service().get_new_access_token(token)
    return json_response(access_token_schema.dump({"access_token": access}))
