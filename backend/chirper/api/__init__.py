"""API blueprint package aggregating the HTTP endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, typically ``"/api"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.rstrip("/"), rel_prefix.strip("/")] if segment
        )
        full_prefix = "/" + full_prefix if not full_prefix.startswith("/") else full_prefix
        app.register_blueprint(bp, url_prefix=full_prefix)


def init_app(app: Flask) -> None:
    """Register every blueprint under ``API_BASE_PREFIX``."""

    from chirper.api.chirps import bp as chirps_bp
    from chirper.api.health import bp as health_bp
    from chirper.api.session import bp as session_bp
    from chirper.api.users import bp as users_bp

    # Each tuple: (blueprint, url_prefix_relative_to_base)
    registry: list[tuple[Blueprint, str]] = [
        (health_bp, ""),  # -> /api/health
        (users_bp, "/users"),
        (session_bp, "/session"),
        (chirps_bp, "/chirps"),
    ]
    register_blueprint_group(app, base_prefix=app.config.get("API_BASE_PREFIX", "/api"), entries=registry)


__all__ = ["init_app", "register_blueprint_group"]
