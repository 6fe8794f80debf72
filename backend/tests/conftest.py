"""Pytest fixtures configuring an isolated application and database per test.

Each test gets a fresh application bound to an in-memory SQLite database whose
schema is created before and dropped after the test, so data never leaks
between cases. Store adapters commit on their own, which rules out the
rollback-only transactional pattern.
"""

from __future__ import annotations

import os

import pytest

from chirper.core.config import TestingConfig
from chirper.core.extensions import db as _db  # Flask-SQLAlchemy instance
from chirper.factory import create_app  # application factory under test


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Keeps refresh-token records in SQL and avoids external services.
    - Disables ProxyFix so tests see the raw environ.
    """

    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
    USE_PROXYFIX = False


@pytest.fixture()
def app():
    """Create a Flask application configured for testing, inside an app context."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    application = create_app(TestConfig)
    with application.app_context():
        _db.create_all()
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app):
    """Database extension bound to the testing application."""
    return _db


@pytest.fixture()
def session(db):
    """Flask-scoped SQLAlchemy session, also wired into Factory Boy."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(db.session)
    yield db.session
    SQLAlchemySession.set(None)


@pytest.fixture()
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
