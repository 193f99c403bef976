# storefront/services/auth/service.py
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from storefront.models.user import User
from storefront.repositories.user import UserRepository
from storefront.services._shared.base import BaseService
from storefront.services._shared.dto import UserPublicOut
from storefront.services._shared.errors import (
    AuthenticationError,
    IncorrectOldPasswordError,
    InvalidCredentialsError,
    NotFoundError,
    RefreshRejectedError,
    TokenInvalidError,
    UserExistsError,
    violates,
)
from storefront.services.auth.dto import (
    AuthResultOut,
    LoginIn,
    PasswordChangeIn,
    RegisterIn,
)
from storefront.services.tokens.dto import Claim
from storefront.services.tokens.service import TokenService

logger = logging.getLogger(__name__)


class AuthGateway(BaseService):
    """
    Account entry points composing :class:`TokenService` with the user store.

    Refresh tokens are revoked by replacement: the user row keeps only the
    latest one, and :meth:`refresh` accepts a token only while it is that
    stored value.
    """

    def __init__(self, *, tokens: TokenService, **kwargs) -> None:
        """
        :param tokens: Token issuer/verifier.
        """
        super().__init__(**kwargs)
        self.tokens = tokens

    # ------------------------------------------------------------------ #
    # Registration / login
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> AuthResultOut:
        """
        Create an account and open a session for it.

        :param dto: Registration input.
        :returns: Sanitized user plus a fresh token pair.
        :rtype: AuthResultOut
        :raises UserExistsError: If the (normalized) email is taken.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            if repo.exists_by_email(dto.email):
                raise UserExistsError()

            try:
                user = repo.add(User(name=dto.name, email=dto.email, password=dto.password))
            except IntegrityError as exc:
                # Lost a race with a concurrent registration.
                if violates(exc, "uq_users_email"):
                    raise UserExistsError() from exc
                raise

            result = self._open_session(user)

        logger.info("User registered", extra={"user_id": result.user.id})
        return result

    def login(self, dto: LoginIn) -> AuthResultOut:
        """
        Verify credentials and issue a token pair.

        :raises InvalidCredentialsError: Unknown email or wrong password.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.authenticate(dto.email, dto.password)
            if user is None:
                raise InvalidCredentialsError()
            result = self._open_session(user)

        logger.info("User logged in", extra={"user_id": result.user.id})
        return result

    # ------------------------------------------------------------------ #
    # Password
    # ------------------------------------------------------------------ #

    def change_password(self, dto: PasswordChangeIn) -> None:
        """
        Replace the password after checking the current one.

        :raises NotFoundError: If no user has that email.
        :raises IncorrectOldPasswordError: If ``old_password`` does not match.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_email(dto.email)
            if user is None:
                raise NotFoundError("User", dto.email)
            if not user.verify_password(dto.old_password):
                raise IncorrectOldPasswordError()
            user.password = dto.new_password
            user_id = user.id

        logger.info("Password changed", extra={"user_id": user_id})

    # ------------------------------------------------------------------ #
    # Sessions
    # ------------------------------------------------------------------ #

    def refresh(self, refresh_token: str) -> AuthResultOut:
        """
        Rotate a refresh token.

        Order of checks
        ---------------
        1. Empty token → :class:`AuthenticationError` (401).
        2. No user stores this exact value (never issued, or superseded by a
           later rotation) → ``"Invalid refresh token"`` (403).
        3. Signature/expiry/subject check fails →
           ``"Invalid or expired refresh token"`` (403).

        On success a new pair is issued and the new refresh token overwrites
        the stored one.
        """
        if not refresh_token:
            raise AuthenticationError("No refresh token provided")

        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_refresh_token(refresh_token)
            if user is None:
                raise RefreshRejectedError("Invalid refresh token")

            try:
                claim = self.tokens.verify_refresh(refresh_token)
            except TokenInvalidError as exc:
                raise RefreshRejectedError("Invalid or expired refresh token") from exc
            if claim.user_id != user.id:
                raise RefreshRejectedError("Invalid or expired refresh token")

            result = self._open_session(user)

        logger.info("Refresh token rotated", extra={"user_id": result.user.id})
        return result

    def verify_session(self, token: str) -> Claim:
        """
        Check an access token without touching the database.

        :raises AuthenticationError: Missing token.
        :raises TokenInvalidError: Bad signature, expired or malformed token.
        """
        if not token:
            raise AuthenticationError("Token missing")
        return self.tokens.verify_access(token)

    def current_user(self, token: str) -> UserPublicOut:
        """
        Resolve the user behind an access token.

        :raises AuthenticationError: Missing or invalid token.
        :raises NotFoundError: Token valid but the user no longer exists.
        """
        claim = self.verify_session(token)
        return self.get_user(claim.user_id)

    def get_user(self, user_id: str) -> UserPublicOut:
        """
        Retrieve the sanitized view of a user.

        :raises NotFoundError: If the user does not exist.
        """
        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            return UserPublicOut.from_model(user)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _open_session(self, user: User) -> AuthResultOut:
        """Issue a token pair for ``user`` and store the refresh token on it."""
        access = self.tokens.issue_access_token(user.id)
        refresh = self.tokens.issue_refresh_token(user.id)
        user.refresh_token = refresh
        return AuthResultOut(
            user=UserPublicOut.from_model(user),
            access_token=access,
            refresh_token=refresh,
        )
