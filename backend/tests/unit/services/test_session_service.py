# tests/unit/services/test_session_service.py
from __future__ import annotations

from datetime import timedelta

import pytest

from chirper.services._shared.errors import ErrorKind, ServiceError
from chirper.services._shared.ports import (
    InMemoryRefreshTokenStore,
    InMemoryUserStore,
    PlainPasswordHasher,
    StubTokenIssuer,
    UserRecord,
)
from chirper.services.session import LoginIn, LoginOut, RegisterIn, SessionService, UserPublicOut


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def users() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture()
def service(users) -> SessionService:
    """Build a SessionService wired to in-memory doubles."""
    return SessionService(
        user_store=users,
        refresh_store=InMemoryRefreshTokenStore(),
        hasher=PlainPasswordHasher(),
        tokens=StubTokenIssuer(),
    )


@pytest.fixture()
def known_user(users) -> UserRecord:
    record = UserRecord(
        id=1,
        name="Known User",
        email="user@example.com",
        password_hash=PlainPasswordHasher().hash_password("correctPassword"),
    )
    users.add(record)
    return record


def _kind(excinfo) -> ErrorKind:
    return excinfo.value.kind


# -------------------------------- Login ----------------------------------- #
def test_login_returns_profile_and_both_tokens(service, known_user):
    out = service.login(LoginIn(email="user@example.com", password="correctPassword"))

    assert isinstance(out, LoginOut)
    assert (out.id, out.email, out.name) == (1, "user@example.com", "Known User")
    assert isinstance(out.access_token, str) and out.access_token
    assert isinstance(out.refresh_token, str) and out.refresh_token


def test_login_records_refresh_token_for_user(service, known_user):
    out = service.login(LoginIn(email="user@example.com", password="correctPassword"))
    assert service.refresh_store.is_refresh_token_valid(1, out.refresh_token)


def test_login_issues_access_token_with_five_minute_ttl(service, known_user):
    service.login(LoginIn(email="user@example.com", password="correctPassword"))
    assert service.tokens.last_ttl == timedelta(minutes=5)


@pytest.mark.parametrize(
    "email",
    [
        "",
        "plainaddress",
        "no-at.example.com",
        "user@nodot",
        "user @example.com",
        "a@b@c.com",
        "user@example.com\n",
        "\nuser@example.com",
    ],
)
def test_login_rejects_malformed_email_before_store_access(service, users, email):
    with pytest.raises(ServiceError) as excinfo:
        service.login(LoginIn(email=email, password="correctPassword"))
    assert _kind(excinfo) is ErrorKind.INVALID_EMAIL
    assert users.calls == []


@pytest.mark.parametrize("password", ["", "short", "x" * 7, "x" * 41])
def test_login_rejects_password_length(service, users, password):
    with pytest.raises(ServiceError) as excinfo:
        service.login(LoginIn(email="user@example.com", password=password))
    assert _kind(excinfo) is ErrorKind.INVALID_PASSWORD
    assert users.calls == []


def test_login_checks_email_before_password(service):
    with pytest.raises(ServiceError) as excinfo:
        service.login(LoginIn(email="bad", password="x"))
    assert _kind(excinfo) is ErrorKind.INVALID_EMAIL


def test_login_unknown_email_and_wrong_password_look_identical(service, known_user):
    with pytest.raises(ServiceError) as unknown:
        service.login(LoginIn(email="ghost@example.com", password="correctPassword"))
    with pytest.raises(ServiceError) as wrong:
        service.login(LoginIn(email="user@example.com", password="wrongPassword"))

    assert _kind(unknown) is _kind(wrong) is ErrorKind.INVALID_CREDS
    assert unknown.value.message == wrong.value.message
    assert unknown.value.status == 401


# ------------------------------ Registration ------------------------------ #
def test_register_returns_public_profile_and_hashes_password(service, users):
    out = service.register(
        RegisterIn(name="New User", email="new@example.com", password="longEnough1")
    )

    assert isinstance(out, UserPublicOut)
    assert out.name == "New User"
    assert out.email == "new@example.com"
    stored = users.get_user_by_email("new@example.com")
    assert stored is not None
    assert stored.password_hash != "longEnough1"
    assert service.hasher.compare_password("longEnough1", stored.password_hash)


@pytest.mark.parametrize(
    ("name", "email", "password", "expected"),
    [
        # every field invalid: email wins
        ("x", "bad", "x", ErrorKind.INVALID_EMAIL),
        # name and password invalid: name wins
        ("x", "ok@example.com", "x", ErrorKind.INVALID_NAME),
        ("Valid Name", "ok@example.com", "x", ErrorKind.INVALID_PASSWORD),
        ("n" * 61, "ok@example.com", "longEnough1", ErrorKind.INVALID_NAME),
        ("Valid Name", "ok@example.com", "p" * 41, ErrorKind.INVALID_PASSWORD),
    ],
)
def test_register_validation_order(service, users, name, email, password, expected):
    with pytest.raises(ServiceError) as excinfo:
        service.register(RegisterIn(name=name, email=email, password=password))
    assert _kind(excinfo) is expected
    assert users.calls == []


@pytest.mark.parametrize(
    "email",
    ["user@example.com\n", "user@example.com\r\n", "a" * 243 + "@example.com"],
)
def test_register_rejects_malformed_or_oversized_email(service, users, email):
    with pytest.raises(ServiceError) as excinfo:
        service.register(RegisterIn(name="Valid Name", email=email, password="longEnough1"))
    assert _kind(excinfo) is ErrorKind.INVALID_EMAIL
    assert users.calls == []


def test_register_accepts_email_at_column_width(service):
    email = "a" * 242 + "@example.com"
    assert len(email) == 254
    out = service.register(RegisterIn(name="Valid Name", email=email, password="longEnough1"))
    assert out.email == email


def test_register_accepts_length_boundaries(service):
    out = service.register(RegisterIn(name="abc", email="b@example.com", password="p" * 8))
    assert out.name == "abc"
    out = service.register(RegisterIn(name="n" * 60, email="c@example.com", password="p" * 40))
    assert len(out.name) == 60


def test_register_duplicate_email_maps_to_conflict(service, known_user):
    with pytest.raises(ServiceError) as excinfo:
        service.register(
            RegisterIn(name="Someone", email="user@example.com", password="longEnough1")
        )
    assert _kind(excinfo) is ErrorKind.EMAIL_ALREADY_REGISTERED
    assert excinfo.value.status == 409


def test_register_propagates_unexpected_store_failure(service, users, monkeypatch):
    def _boom(*_args, **_kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(users, "create_user", _boom)
    with pytest.raises(RuntimeError):
        service.register(RegisterIn(name="Someone", email="s@example.com", password="longEnough1"))


# -------------------------------- Refresh --------------------------------- #
def test_get_new_access_token_for_recorded_refresh_token(service, known_user):
    out = service.login(LoginIn(email="user@example.com", password="correctPassword"))

    access = service.get_new_access_token(out.refresh_token)

    assert access and access != out.access_token
    claims = service.tokens.verify_access_token(access)
    assert (claims.user_id, claims.email) == (1, "user@example.com")


def test_refresh_token_is_not_rotated(service, known_user):
    out = service.login(LoginIn(email="user@example.com", password="correctPassword"))
    service.get_new_access_token(out.refresh_token)
    # still usable
    assert service.get_new_access_token(out.refresh_token)


def test_refresh_with_malformed_token_fails(service):
    with pytest.raises(ServiceError) as excinfo:
        service.get_new_access_token("not-a-token")
    assert _kind(excinfo) is ErrorKind.INVALID_REFRESH_TOKEN


def test_refresh_with_access_token_fails(service, known_user):
    out = service.login(LoginIn(email="user@example.com", password="correctPassword"))
    with pytest.raises(ServiceError) as excinfo:
        service.get_new_access_token(out.access_token)
    assert _kind(excinfo) is ErrorKind.INVALID_REFRESH_TOKEN


def test_refresh_with_valid_but_unrecorded_token_fails(service):
    # Signed by the issuer but never saved in the store
    token = service.tokens.issue_refresh_token(1, "user@example.com")
    with pytest.raises(ServiceError) as excinfo:
        service.get_new_access_token(token)
    assert _kind(excinfo) is ErrorKind.INVALID_REFRESH_TOKEN


def test_multiple_logins_accumulate_refresh_tokens(service, known_user):
    first = service.login(LoginIn(email="user@example.com", password="correctPassword"))
    second = service.login(LoginIn(email="user@example.com", password="correctPassword"))

    assert first.refresh_token != second.refresh_token
    assert service.refresh_store.count_for_user(1) == 2
    assert service.get_new_access_token(first.refresh_token)
