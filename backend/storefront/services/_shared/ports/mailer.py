from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol


class MailTransportError(Exception):
    """Raised by mailer adapters when a message could not be handed off."""


@dataclass(frozen=True, slots=True)
class MailMessage:
    """
    Transport-neutral outgoing message.

    :param sender: ``From`` header (``"Name" <addr>`` or bare address).
    :type sender: str
    :param to: Single recipient address.
    :type to: str
    :param subject: Subject line.
    :type subject: str
    :param text: Plain-text body.
    :type text: str
    :param html: Optional HTML alternative.
    :type html: str | None
    """

    sender: str
    to: str
    subject: str
    text: str
    html: str | None = None


@dataclass(frozen=True, slots=True)
class SendResult:
    """
    Explicit per-message delivery outcome.

    :param recipient: Address the message was sent to.
    :type recipient: str
    :param ok: Whether the transport accepted the message.
    :type ok: bool
    :param error: Transport error text when ``ok`` is false.
    :type error: str | None
    """

    recipient: str
    ok: bool
    error: str | None = None


class Mailer(Protocol):
    """Port for asynchronous mail delivery."""

    async def send(self, message: MailMessage) -> None:
        """
        Deliver one message.

        :raises MailTransportError: when the transport rejects or fails.
        """


class InMemoryMailer(Mailer):
    """
    Mailer that records messages instead of sending them.

    Used by the testing and development configurations. Setting
    :attr:`fail_with` makes every subsequent :meth:`send` raise it.
    """

    def __init__(self) -> None:
        self.outbox: list[MailMessage] = []
        self.fail_with: MailTransportError | None = None
        self._lock = threading.Lock()

    async def send(self, message: MailMessage) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        with self._lock:
            self.outbox.append(message)

    def sent_to(self, recipient: str) -> list[MailMessage]:
        """Return captured messages addressed to ``recipient``."""
        return [m for m in self.outbox if m.to == recipient]

    def clear(self) -> None:
        with self._lock:
            self.outbox.clear()
        self.fail_with = None
