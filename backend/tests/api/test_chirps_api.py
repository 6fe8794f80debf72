"""HTTP tests for the ``/api/chirps`` routes."""

from __future__ import annotations

import pytest

from tests.factories.chirp import ChirpFactory
from tests.factories.user import UserFactory
from tests.helpers.assertions import assert_chirp_view, assert_error
from tests.helpers.http import json_headers

VALID = "Valid length message!!"


# ------------------------------ Access control ---------------------------- #
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/api/chirps"),
        ("post", "/api/chirps"),
        ("get", "/api/chirps/1"),
        ("put", "/api/chirps/1"),
        ("delete", "/api/chirps/1"),
    ],
)
def test_every_chirp_route_requires_access_token(client, session, method, path):
    resp = getattr(client, method)(path, json={"message": VALID})
    assert_error(resp, 401, "ERR_INVALID_ACCESS_TOKEN")


@pytest.mark.parametrize(
    "header",
    ["Bearer", "Bearer    ", "Token abc", "Bearer not.a.jwt"],
)
def test_bad_authorization_headers_are_rejected(client, session, header):
    resp = client.get("/api/chirps", headers={"Authorization": header})
    assert_error(resp, 401, "ERR_INVALID_ACCESS_TOKEN")


def test_refresh_token_is_not_an_access_token(client, tokens):
    resp = client.get("/api/chirps", headers=json_headers(tokens["refresh_token"]))
    assert_error(resp, 401, "ERR_INVALID_ACCESS_TOKEN")


def test_bearer_scheme_is_case_insensitive(client, tokens):
    resp = client.get("/api/chirps", headers={"Authorization": f"bearer {tokens['access_token']}"})
    assert resp.status_code == 200


# --------------------------------- Create --------------------------------- #
def test_create_chirp(client, user, auth_header):
    resp = client.post("/api/chirps", json={"message": VALID}, headers=auth_header)

    assert resp.status_code == 200
    body = resp.get_json()
    assert_chirp_view(body)
    assert body["message"] == VALID
    assert body["author"] == {"id": user.id, "name": user.name, "email": user.email}


def test_create_stores_trimmed_message(client, auth_header):
    resp = client.post("/api/chirps", json={"message": f"   {VALID}  "}, headers=auth_header)
    assert resp.get_json()["message"] == VALID


@pytest.mark.parametrize("payload", [{}, {"message": ""}, {"message": "Too short"}, {"message": 12}])
def test_create_invalid_message(client, auth_header, payload):
    resp = client.post("/api/chirps", json=payload, headers=auth_header)
    assert_error(resp, 400, "ERR_INVALID_MESSAGE")


def test_create_blank_message_has_distinct_text(client, auth_header):
    blank = client.post("/api/chirps", json={"message": "   "}, headers=auth_header).get_json()
    short = client.post("/api/chirps", json={"message": "short"}, headers=auth_header).get_json()
    assert blank["err"] == short["err"] == "ERR_INVALID_MESSAGE"
    assert blank["msg"] != short["msg"]


# --------------------------------- Read ----------------------------------- #
def test_list_empty(client, auth_header):
    resp = client.get("/api/chirps", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_list_newest_first(client, auth_header):
    older = ChirpFactory(created_at=1_000, updated_at=1_000)
    newer = ChirpFactory(created_at=2_000, updated_at=2_000)

    body = client.get("/api/chirps", headers=auth_header).get_json()

    assert [c["id"] for c in body] == [newer.id, older.id]
    for chirp in body:
        assert_chirp_view(chirp)


def test_list_caps_at_one_hundred(client, auth_header):
    author = UserFactory()
    for i in range(101):
        ChirpFactory(author=author, created_at=i, updated_at=i)

    body = client.get("/api/chirps", headers=auth_header).get_json()

    assert len(body) == 100
    assert body[0]["created_at"] == 100
    assert body[-1]["created_at"] == 1


def test_get_one_round_trip(client, auth_header):
    created = client.post("/api/chirps", json={"message": VALID}, headers=auth_header).get_json()

    resp = client.get(f"/api/chirps/{created['id']}", headers=auth_header)

    assert resp.status_code == 200
    assert resp.get_json() == created


def test_get_one_missing(client, auth_header):
    assert_error(client.get("/api/chirps/999", headers=auth_header), 404, "ERR_NOT_FOUND")


def test_non_integer_id_is_not_found(client, auth_header):
    assert_error(client.get("/api/chirps/abc", headers=auth_header), 404, "ERR_NOT_FOUND")


# --------------------------------- Edit ----------------------------------- #
def test_edit_own_chirp(client, user, auth_header):
    chirp = ChirpFactory(author=user, created_at=1_000, updated_at=1_000)

    resp = client.put(
        f"/api/chirps/{chirp.id}", json={"message": "Edited message text"}, headers=auth_header
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Edited message text"
    assert body["created_at"] == 1_000
    assert body["updated_at"] > 1_000


def test_edit_foreign_chirp_is_forbidden(client, auth_header):
    chirp = ChirpFactory()

    resp = client.put(f"/api/chirps/{chirp.id}", json={"message": VALID}, headers=auth_header)

    body = assert_error(resp, 403, "ERR_FORBIDDEN_ACCESS")
    assert body["ok"] is False
    assert isinstance(body["ts"], int)


def test_edit_missing_chirp_is_forbidden(client, auth_header):
    resp = client.put("/api/chirps/424242", json={"message": VALID}, headers=auth_header)
    assert_error(resp, 403, "ERR_FORBIDDEN_ACCESS")


def test_edit_invalid_message(client, user, auth_header):
    chirp = ChirpFactory(author=user)
    resp = client.put(f"/api/chirps/{chirp.id}", json={"message": "nope"}, headers=auth_header)
    assert_error(resp, 400, "ERR_INVALID_MESSAGE")


# -------------------------------- Delete ---------------------------------- #
def test_delete_own_chirp(client, user, auth_header):
    chirp = ChirpFactory(author=user)
    chirp_id = chirp.id

    resp = client.delete(f"/api/chirps/{chirp_id}", headers=auth_header)

    assert resp.status_code == 200
    assert resp.get_json() == {"id": chirp_id}
    assert_error(client.get(f"/api/chirps/{chirp_id}", headers=auth_header), 404, "ERR_NOT_FOUND")


def test_delete_missing_chirp(client, auth_header):
    assert_error(client.delete("/api/chirps/31337", headers=auth_header), 404, "ERR_NOT_FOUND")


def test_delete_foreign_chirp_is_forbidden(client, auth_header):
    chirp = ChirpFactory()
    chirp_id = chirp.id

    body = assert_error(
        client.delete(f"/api/chirps/{chirp_id}", headers=auth_header), 403, "ERR_FORBIDDEN_ACCESS"
    )

    assert body["ok"] is False
    assert client.get(f"/api/chirps/{chirp_id}", headers=auth_header).status_code == 200


def test_edit_with_unchanged_message_still_bumps_updated_at(client, user, auth_header):
    chirp = ChirpFactory(author=user, message=VALID, created_at=1_000, updated_at=1_000)

    resp = client.put(f"/api/chirps/{chirp.id}", json={"message": VALID}, headers=auth_header)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == VALID
    assert body["created_at"] == 1_000
    assert body["updated_at"] > 1_000
