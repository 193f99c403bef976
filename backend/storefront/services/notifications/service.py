# storefront/services/notifications/service.py
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from html import escape

from storefront.services._shared.errors import MailDeliveryError
from storefront.services._shared.ports.mailer import (
    Mailer,
    MailMessage,
    MailTransportError,
    SendResult,
)

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Password Reset"


class NotificationService:
    """
    Compose and dispatch transactional e-mail.

    Every send is an ``async`` task on the :class:`Mailer` port; independent
    messages are joined with :func:`asyncio.gather` and each one reports an
    explicit :class:`SendResult` instead of raising.
    """

    def __init__(self, *, mailer: Mailer, sender: str) -> None:
        """
        :param mailer: Delivery adapter (SMTP or in-memory).
        :param sender: ``From`` header for every message.
        """
        self.mailer = mailer
        self.sender = sender

    # ------------------------------------------------------------------ #
    # Messages
    # ------------------------------------------------------------------ #

    def password_reset_message(self, email: str, link: str) -> MailMessage:
        safe = escape(link, quote=True)
        return MailMessage(
            sender=self.sender,
            to=email,
            subject=RESET_SUBJECT,
            text=f"Please use the following link to reset your password: {link}",
            html=(
                "<p>Please use the following link to reset your password:</p>"
                f'<p><a href="{safe}">{safe}</a></p>'
            ),
        )

    def send_password_reset(self, email: str, link: str) -> SendResult:
        """
        Send the reset link to ``email``.

        :returns: Successful delivery result.
        :rtype: SendResult
        :raises MailDeliveryError: when the transport fails.
        """
        results = self.dispatch(self.password_reset_message(email, link))
        self.ensure_delivered(results)
        return results[0]

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #

    def dispatch(self, *messages: MailMessage) -> list[SendResult]:
        """
        Send ``messages`` concurrently and wait for all of them.

        Results keep the order of ``messages``. Must be called from
        synchronous code (a Flask view); it owns the event loop for the
        duration of the call.
        """
        if not messages:
            return []
        return asyncio.run(self._gather(messages))

    async def _gather(self, messages: Sequence[MailMessage]) -> list[SendResult]:
        results = await asyncio.gather(*(self._send_one(m) for m in messages))
        return list(results)

    async def _send_one(self, message: MailMessage) -> SendResult:
        try:
            await self.mailer.send(message)
        except MailTransportError as exc:
            logger.warning("Mail not delivered", extra={"recipient": message.to})
            return SendResult(recipient=message.to, ok=False, error=str(exc) or "transport error")
        return SendResult(recipient=message.to, ok=True)

    @staticmethod
    def ensure_delivered(results: Iterable[SendResult]) -> None:
        """
        Raise when any result failed.

        :raises MailDeliveryError: listing the failed recipients.
        """
        failed = [r.recipient for r in results if not r.ok]
        if failed:
            raise MailDeliveryError(f"Failed to send email to {', '.join(failed)}")
