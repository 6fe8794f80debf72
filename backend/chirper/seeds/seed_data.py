"""Idempotent database seed helpers for local development environments."""

from __future__ import annotations

import logging
from typing import cast

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from chirper.infra.hashing.werkzeug_password_hasher import WerkzeugPasswordHasher
from chirper.models.chirp import Chirp
from chirper.models.user import User

LOGGER = logging.getLogger(__name__)

USER_FIXTURES: list[dict[str, str]] = [
    {"name": "Alex Martinez", "email": "alex.martinez@example.com", "password": "devPass123!"},
    {"name": "Jamie Lee", "email": "jamie.lee@example.com", "password": "strongPass123"},
    {"name": "Sara Kim", "email": "sara.kim@example.com", "password": "chirpMore2024"},
]

CHIRP_FIXTURES: list[dict[str, str]] = [
    {"author": "alex.martinez@example.com", "message": "First chirp from the dev database."},
    {"author": "alex.martinez@example.com", "message": "Seed data keeps local testing honest."},
    {"author": "jamie.lee@example.com", "message": "Hello from Jamie, welcome to chirper!"},
    {"author": "sara.kim@example.com", "message": "Short posts, long conversations."},
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def seed_users(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create demo users; existing emails are left untouched."""
    if verbose:
        LOGGER.info("Seeding users...")
    session = _session(database)
    hasher = WerkzeugPasswordHasher(method=current_app.config.get("PASSWORD_HASH_METHOD", "scrypt"))
    summary: dict[str, dict[str, int]] = {}
    for fixture in USER_FIXTURES:
        user = session.execute(select(User).filter_by(email=fixture["email"])).scalar_one_or_none()
        created = user is None
        if user is None:
            session.add(
                User(
                    name=fixture["name"],
                    email=fixture["email"],
                    password_hash=hasher.hash_password(fixture["password"]),
                )
            )
        _touch(summary, "users", created)
    session.commit()
    return summary


def seed_chirps(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create demo chirps keyed by ``(author, message)``."""
    if verbose:
        LOGGER.info("Seeding chirps...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    for fixture in CHIRP_FIXTURES:
        author = session.execute(
            select(User).filter_by(email=fixture["author"])
        ).scalar_one_or_none()
        if author is None:
            raise RuntimeError(f"Author {fixture['author']} missing while seeding chirps")
        chirp = session.execute(
            select(Chirp).filter_by(user_id=author.id, message=fixture["message"])
        ).scalar_one_or_none()
        created = chirp is None
        if chirp is None:
            session.add(Chirp(user_id=author.id, message=fixture["message"]))
        _touch(summary, "chirps", created)
    session.commit()
    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders in foreign-key order."""
    if verbose:
        LOGGER.info("Running full seed pipeline...")
    combined: dict[str, dict[str, int]] = {}
    for func in (seed_users, seed_chirps):
        result = func(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = ["seed_users", "seed_chirps", "run_all"]
