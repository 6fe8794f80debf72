"""User and session Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .common import RequestSchema


class RegisterSchema(RequestSchema):
    """Input payload for account registration. Missing fields load as ``""``."""

    name = fields.String(load_default="")
    email = fields.String(load_default="")
    password = fields.String(load_default="")


class LoginSchema(RequestSchema):
    """Input payload for authenticating a user."""

    email = fields.String(load_default="")
    password = fields.String(load_default="")


class UserSchema(Schema):
    """Public user representation."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    email = fields.String(required=True)


class LoginResponseSchema(Schema):
    """Profile plus freshly issued token pair."""

    id = fields.Integer(required=True)
    email = fields.String(required=True)
    name = fields.String(required=True)
    access_token = fields.String(required=True)
    refresh_token = fields.String(required=True)


class AccessTokenSchema(Schema):
    access_token = fields.String(required=True)
