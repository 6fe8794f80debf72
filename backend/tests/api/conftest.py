"""Fixtures shared by HTTP-level tests."""

from __future__ import annotations

import pytest

from tests.factories.user import DEFAULT_PASSWORD, UserFactory
from tests.helpers.http import json_headers


@pytest.fixture()
def user(session):
    """Persist and return a user whose password is ``DEFAULT_PASSWORD``."""
    return UserFactory()


@pytest.fixture()
def login(client):
    """Return a callable that logs a user in and returns the JSON body."""

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict:
        resp = client.post("/api/session", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_data(as_text=True)
        return resp.get_json()

    return _login


@pytest.fixture()
def tokens(user, login) -> dict:
    return login(user.email)


@pytest.fixture()
def auth_header(tokens) -> dict[str, str]:
    """Authorization header for authenticated requests."""
    return json_headers(tokens["access_token"])
