"""User registration endpoint."""

from __future__ import annotations

from flask import Blueprint

from chirper.api.deps import build_session_service, json_body, json_response, timing
from chirper.schemas import RegisterSchema, UserSchema
from chirper.services import RegisterIn

bp = Blueprint("users", __name__)

register_schema = RegisterSchema()
user_schema = UserSchema()


@bp.post("")
@timing
def register():
    """Register a new user and return its public profile."""

    data = register_schema.load_lenient(json_body())
    user = build_session_service().register(
        RegisterIn(name=data["name"], email=data["email"], password=data["password"])
    )
    return json_response(user_schema.dump(user))
