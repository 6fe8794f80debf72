"""Tests for the ``flask seed`` command group."""

from __future__ import annotations

from sqlalchemy import func, select

from chirper.models import Chirp, User
from chirper.seeds.seed_data import CHIRP_FIXTURES, USER_FIXTURES


def _count(session, model) -> int:
    return session.execute(select(func.count()).select_from(model)).scalar_one()


def test_seed_run_is_idempotent(app, session):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed", "run"])
    second = runner.invoke(args=["seed", "run"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert f"created={len(USER_FIXTURES):>2}" in first.output
    assert f"existing={len(CHIRP_FIXTURES):>2}" in second.output
    assert _count(session, User) == len(USER_FIXTURES)
    assert _count(session, Chirp) == len(CHIRP_FIXTURES)


def test_seeded_user_can_log_in(app, client, session):
    app.test_cli_runner().invoke(args=["seed", "run"])
    fixture = USER_FIXTURES[0]

    resp = client.post(
        "/api/session", json={"email": fixture["email"], "password": fixture["password"]}
    )
    assert resp.status_code == 200


def test_seed_fresh_requires_confirmation(app, session):
    result = app.test_cli_runner().invoke(args=["seed", "fresh"], input="n\n")
    assert result.exit_code != 0


def test_seed_fresh_refused_in_production(app, session, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    result = app.test_cli_runner().invoke(args=["seed", "fresh", "--yes"])
    assert result.exit_code != 0
    assert "non-production" in result.output


def test_seed_fresh_rebuilds_and_seeds(app, session, monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    result = app.test_cli_runner().invoke(args=["seed", "fresh", "--yes"])
    assert result.exit_code == 0, result.output
    assert _count(session, User) == len(USER_FIXTURES)
