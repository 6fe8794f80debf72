"""Unit tests for lenient request schema loading."""

from __future__ import annotations

import pytest

from chirper.schemas import ChirpInSchema, LoginSchema, RegisterSchema


def test_register_schema_fills_missing_fields_with_empty_strings():
    assert RegisterSchema().load_lenient({}) == {"email": "", "name": "", "password": ""}


def test_unknown_fields_are_ignored():
    data = LoginSchema().load_lenient({"email": "a@b.co", "password": "x", "admin": True})
    assert data == {"email": "a@b.co", "password": "x"}


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"email": 1, "name": 2, "password": 3}, {"email": "", "name": "", "password": ""}),
        (
            {"email": "bad", "name": "Valid", "password": None},
            {"email": "bad", "name": "Valid", "password": ""},
        ),
        (
            {"email": "a@b.co", "name": ["x"], "password": "secret12"},
            {"email": "a@b.co", "name": "", "password": "secret12"},
        ),
        ("not an object", {"email": "", "name": "", "password": ""}),
        ([{"email": "a@b.co"}], {"email": "", "name": "", "password": ""}),
    ],
)
def test_register_schema_blanks_only_wrong_typed_fields(payload, expected):
    assert RegisterSchema().load_lenient(payload) == expected


def test_login_schema_keeps_valid_email_next_to_wrong_typed_password():
    data = LoginSchema().load_lenient({"email": "bad", "password": 12345678})
    assert data == {"email": "bad", "password": ""}


def test_chirp_schema_wrong_type_is_blank_message():
    assert ChirpInSchema().load_lenient({"message": ["list"]}) == {"message": ""}
