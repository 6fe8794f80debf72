"""Unit tests for configuration selection and token secret checks."""

from __future__ import annotations

import pytest

from chirper.core.config import (
    PLACEHOLDER_ACCESS_SECRET,
    PLACEHOLDER_REFRESH_SECRET,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    get_config,
    validate_token_secrets,
)
from chirper.factory import create_app


@pytest.mark.parametrize(
    ("value", "expected"),
    [("production", ProductionConfig), (" Testing ", TestingConfig), ("nonsense", DevelopmentConfig)],
)
def test_get_config_reads_app_env(monkeypatch, value, expected):
    monkeypatch.setenv("APP_ENV", value)
    assert get_config() is expected


def test_get_config_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_config() is DevelopmentConfig


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False), ("", False)])
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("SOME_FLAG", raw)
    assert env_bool("SOME_FLAG") is expected


def test_secrets_must_differ():
    with pytest.raises(RuntimeError, match="different secrets"):
        validate_token_secrets(
            {"ACCESS_TOKEN_SECRET": "same", "REFRESH_TOKEN_SECRET": "same", "TESTING": True}
        )


def test_secrets_must_be_present():
    with pytest.raises(RuntimeError):
        validate_token_secrets({"ACCESS_TOKEN_SECRET": "a", "REFRESH_TOKEN_SECRET": ""})


def test_placeholders_rejected_in_production():
    with pytest.raises(RuntimeError, match="production"):
        validate_token_secrets(
            {
                "ACCESS_TOKEN_SECRET": PLACEHOLDER_ACCESS_SECRET,
                "REFRESH_TOKEN_SECRET": PLACEHOLDER_REFRESH_SECRET,
            }
        )


def test_placeholders_tolerated_in_development():
    validate_token_secrets(
        {
            "ACCESS_TOKEN_SECRET": PLACEHOLDER_ACCESS_SECRET,
            "REFRESH_TOKEN_SECRET": PLACEHOLDER_REFRESH_SECRET,
            "DEBUG": True,
        }
    )


def test_create_app_refuses_shared_secret():
    class SharedSecretConfig(TestingConfig):
        REFRESH_TOKEN_SECRET = TestingConfig.ACCESS_TOKEN_SECRET

    with pytest.raises(RuntimeError):
        create_app(SharedSecretConfig)
