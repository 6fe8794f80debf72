"""Chirp endpoints, all gated by the access-token check."""

from __future__ import annotations

from flask import Blueprint

from chirper.api.deps import (
    authenticate_access_token,
    build_chirp_service,
    current_identity,
    json_body,
    json_response,
    timing,
)
from chirper.schemas import ChirpDeletedSchema, ChirpInSchema, ChirpSchema

bp = Blueprint("chirps", __name__)
bp.before_request(authenticate_access_token)

chirp_in_schema = ChirpInSchema()
chirp_schema = ChirpSchema()
chirps_schema = ChirpSchema(many=True)
deleted_schema = ChirpDeletedSchema()


@bp.post("")
@timing
def create_chirp():
    data = chirp_in_schema.load_lenient(json_body())
    chirp = build_chirp_service().create_chirp(current_identity(), data["message"])
    return json_response(chirp_schema.dump(chirp))


@bp.get("")
@timing
def list_chirps():
    """Up to 100 most recent chirps, newest first."""

    return json_response(chirps_schema.dump(build_chirp_service().get_chirp_list()))


@bp.get("/<int:chirp_id>")
@timing
def get_chirp(chirp_id: int):
    return json_response(chirp_schema.dump(build_chirp_service().get_one_chirp(chirp_id)))


@bp.put("/<int:chirp_id>")
@timing
def edit_chirp(chirp_id: int):
    data = chirp_in_schema.load_lenient(json_body())
    chirp = build_chirp_service().edit_chirp(current_identity(), chirp_id, data["message"])
    return json_response(chirp_schema.dump(chirp))


@bp.delete("/<int:chirp_id>")
@timing
def delete_chirp(chirp_id: int):
    build_chirp_service().delete_chirp(current_identity(), chirp_id)
    return json_response(deleted_schema.dump({"id": chirp_id}))
