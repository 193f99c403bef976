"""SMTP mail adapter built on aiosmtplib."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from email.message import EmailMessage

import aiosmtplib

from storefront.services._shared.ports.mailer import Mailer, MailMessage, MailTransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SMTPSettings:
    """
    Connection settings for :class:`SMTPMailer`.

    :param host: SMTP server hostname.
    :param port: SMTP port (587 for submission with STARTTLS).
    :param username: Optional login user.
    :param password: Optional login password.
    :param start_tls: Upgrade the connection with STARTTLS.
    :param timeout: Socket timeout in seconds.
    """

    host: str
    port: int = 587
    username: str | None = None
    password: str | None = None
    start_tls: bool = True
    timeout: float = 30.0


class SMTPMailer(Mailer):
    """
    Deliver :class:`MailMessage` objects over SMTP.

    One connection per message; concurrency is obtained by awaiting several
    :meth:`send` calls together (see ``NotificationService.dispatch``).
    """

    def __init__(self, settings: SMTPSettings) -> None:
        self.settings = settings

    def _build(self, message: MailMessage) -> EmailMessage:
        mime = EmailMessage()
        mime["From"] = message.sender
        mime["To"] = message.to
        mime["Subject"] = message.subject
        mime.set_content(message.text)
        if message.html:
            mime.add_alternative(message.html, subtype="html")
        return mime

    async def send(self, message: MailMessage) -> None:
        cfg = self.settings
        try:
            await aiosmtplib.send(
                self._build(message),
                hostname=cfg.host,
                port=cfg.port,
                username=cfg.username,
                password=cfg.password,
                start_tls=cfg.start_tls,
                timeout=cfg.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.warning(
                "SMTP delivery failed: %s",
                type(exc).__name__,
                extra={"recipient": message.to},
            )
            raise MailTransportError(str(exc)) from exc
        logger.info("SMTP message accepted", extra={"recipient": message.to})
