# storefront/services/password_reset/service.py
from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

from storefront.repositories.user import UserRepository
from storefront.services._shared.base import BaseService
from storefront.services._shared.errors import (
    InvalidOrExpiredTokenError,
    MailDeliveryError,
    NotFoundError,
)
from storefront.services.notifications.service import NotificationService
from storefront.services.password_reset.dto import (
    ResetConsumeIn,
    ResetRequestIn,
    ResetTicketOut,
)

logger = logging.getLogger(__name__)

RESET_TOKEN_BYTES = 32


class PasswordResetFlow(BaseService):
    """
    Time-boxed, single-use password reset tokens.

    Lifecycle
    ---------
    1. :meth:`request_reset` stores ``(token, expires_at)`` on the user and
       mails ``<reset_url>/<token>``.
    2. :meth:`consume_reset` accepts the token once while ``expires_at > now``
       and clears both fields on success.
    """

    def __init__(
        self,
        *,
        notifications: NotificationService,
        reset_url: str,
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        :param notifications: Mail composer/dispatcher.
        :param reset_url: Base URL of the page receiving the token.
        :param ttl: Token lifetime.
        :param clock: Callable returning the current UTC instant.
        """
        super().__init__(clock=clock)
        self.notifications = notifications
        self.reset_url = reset_url.rstrip("/")
        self.ttl = ttl

    def reset_link(self, token: str) -> str:
        return f"{self.reset_url}/{token}"

    def request_reset(self, dto: ResetRequestIn) -> ResetTicketOut:
        """
        Issue a reset token and mail the link.

        The token is committed before the mail is sent, so a transport
        failure leaves a valid token behind and the client may simply ask
        again (which replaces it).

        :param dto: Reset request input.
        :returns: The stored token and its expiry.
        :rtype: ResetTicketOut
        :raises NotFoundError: If no user has that email.
        :raises MailDeliveryError: If the reset mail could not be sent.
        """
        token = secrets.token_hex(RESET_TOKEN_BYTES)
        expires_at = self.now_utc() + self.ttl

        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_email(dto.email)
            if user is None:
                raise NotFoundError("User", dto.email)
            user.reset_token = token
            user.reset_token_expiration = expires_at
            email = user.email
            user_id = user.id

        logger.info("Password reset token issued", extra={"user_id": user_id})
        try:
            self.notifications.send_password_reset(email, self.reset_link(token))
        except MailDeliveryError as exc:
            raise MailDeliveryError("Failed to send password reset email.") from exc

        return ResetTicketOut(token=token, expires_at=expires_at)

    def consume_reset(self, dto: ResetConsumeIn) -> None:
        """
        Replace the password of the user holding a live ``dto.token``.

        :param dto: Token and replacement password.
        :raises InvalidOrExpiredTokenError: Unknown, consumed or expired token.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_reset_token(dto.token, now=self.now_utc())
            if user is None:
                raise InvalidOrExpiredTokenError()
            user.password = dto.new_password
            user.clear_reset_token()
            user_id = user.id

        logger.info("Password reset completed", extra={"user_id": user_id})
