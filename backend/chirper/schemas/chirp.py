"""Chirp Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .common import RequestSchema


class ChirpInSchema(RequestSchema):
    """Input payload for creating or editing a chirp."""

    message = fields.String(load_default="")


class AuthorSchema(Schema):
    id = fields.Integer(required=True)
    name = fields.String(required=True)
    email = fields.String(required=True)


class ChirpSchema(Schema):
    """Chirp view: message, author identity and unix timestamps."""

    id = fields.Integer(required=True)
    message = fields.String(required=True)
    author = fields.Nested(AuthorSchema, required=True)
    created_at = fields.Integer(required=True)
    updated_at = fields.Integer(required=True)


class ChirpDeletedSchema(Schema):
    id = fields.Integer(required=True)
