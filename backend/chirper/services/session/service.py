# chirper/services/session/service.py
from __future__ import annotations

import logging
from datetime import timedelta

from chirper.services._shared.base import BaseService
from chirper.services._shared.errors import ErrorKind, ServiceError
from chirper.services._shared.ports.password_hasher import PasswordHasher
from chirper.services._shared.ports.refresh_token_store import RefreshTokenStore
from chirper.services._shared.ports.token_issuer import TokenIssuer
from chirper.services._shared.ports.user_store import DuplicateEmailError, UserStore
from chirper.services.session.dto import LoginIn, LoginOut, RegisterIn, UserPublicOut

logger = logging.getLogger(__name__)

PASSWORD_LENGTH = (8, 40)
NAME_LENGTH = (3, 60)


class SessionService(BaseService):
    """
    Session lifecycle service (register / login / access-token refresh).

    Validation order is part of the contract: login checks email then
    password, registration checks email, name, then password. Each check
    fails fast before any collaborator is touched.
    """

    def __init__(
        self,
        *,
        user_store: UserStore,
        refresh_store: RefreshTokenStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        access_ttl: timedelta = timedelta(minutes=5),
    ) -> None:
        """
        Initialize the service with its collaborators.

        :param user_store: Users persistence port.
        :param refresh_store: Server-side record of refresh tokens.
        :param hasher: Password hash/compare primitive.
        :param tokens: Access/refresh token issuer.
        :param access_ttl: Access token lifetime.
        """
        self.users = user_store
        self.refresh_store = refresh_store
        self.hasher = hasher
        self.tokens = tokens
        self.access_ttl = access_ttl

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> LoginOut:
        """
        Authenticate credentials and issue an access/refresh token pair.

        Unknown email and wrong password are indistinguishable to the caller.

        :raises ServiceError: ``INVALID_EMAIL``, ``INVALID_PASSWORD`` or
            ``INVALID_CREDS``.
        """
        self._check_email(dto.email)
        self._check_password(dto.password)

        user = self.users.get_user_by_email(dto.email)
        if user is None or not self.hasher.compare_password(dto.password, user.password_hash):
            logger.warning("login rejected", extra={"err": ErrorKind.INVALID_CREDS.wire_name})
            raise ServiceError(ErrorKind.INVALID_CREDS)

        access = self.tokens.issue_access_token(user.id, user.email, self.access_ttl)
        refresh = self.tokens.issue_refresh_token(user.id, user.email)
        self.refresh_store.save_refresh_token(user.id, refresh)

        logger.info("user logged in", extra={"user_id": user.id})
        return LoginOut(
            id=user.id,
            email=user.email,
            name=user.name,
            access_token=access,
            refresh_token=refresh,
        )

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> UserPublicOut:
        """
        Create a user with a hashed password.

        :raises ServiceError: ``INVALID_EMAIL``, ``INVALID_NAME``,
            ``INVALID_PASSWORD`` or ``EMAIL_ALREADY_REGISTERED``.
        """
        self._check_email(dto.email)
        self.ensure_length(dto.name, low=NAME_LENGTH[0], high=NAME_LENGTH[1], kind=ErrorKind.INVALID_NAME)
        self._check_password(dto.password)

        password_hash = self.hasher.hash_password(dto.password)
        try:
            user = self.users.create_user(dto.name, dto.email, password_hash)
        except DuplicateEmailError as exc:
            raise ServiceError(ErrorKind.EMAIL_ALREADY_REGISTERED) from exc

        logger.info("user registered", extra={"user_id": user.id})
        return UserPublicOut(id=user.id, name=user.name, email=user.email)

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def get_new_access_token(self, refresh_token: str) -> str:
        """
        Exchange a recorded refresh token for a new access token.

        The refresh token itself is not rotated.

        :raises ServiceError: ``INVALID_REFRESH_TOKEN`` when the token does
            not verify or is not recorded for its user.
        """
        claims = self.tokens.verify_refresh_token(refresh_token)
        if not self.refresh_store.is_refresh_token_valid(claims.user_id, refresh_token):
            logger.warning(
                "refresh token not recorded",
                extra={"user_id": claims.user_id, "err": ErrorKind.INVALID_REFRESH_TOKEN.wire_name},
            )
            raise ServiceError(ErrorKind.INVALID_REFRESH_TOKEN)

        logger.info("access token refreshed", extra={"user_id": claims.user_id})
        return self.tokens.issue_access_token(claims.user_id, claims.email, self.access_ttl)

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def _check_email(self, email: str) -> None:
        if not self.is_valid_email(email):
            raise ServiceError(ErrorKind.INVALID_EMAIL)

    def _check_password(self, password: str) -> None:
        low, high = PASSWORD_LENGTH
        self.ensure_length(password, low=low, high=high, kind=ErrorKind.INVALID_PASSWORD)
