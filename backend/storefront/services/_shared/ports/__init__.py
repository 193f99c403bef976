"""
storefront.services._shared.ports
=================================

Collection of *ports* (hexagonal interfaces) that define the contracts
between the service layer and its infrastructure.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for JWT signing and decoding.

- :mod:`mailer`:
    Defines :class:`~.Mailer`, the :class:`~.MailMessage` / :class:`~.SendResult`
    value objects and :class:`~.InMemoryMailer` for tests and development.

Design Notes
------------
These ports follow the *Dependency Inversion Principle (DIP)* to keep
the service layer independent from implementation details.
Concrete adapters (PyJWT, aiosmtplib) live under ``storefront.infra``.
"""

from __future__ import annotations

from .mailer import InMemoryMailer, Mailer, MailMessage, MailTransportError, SendResult
from .token_provider import TokenProvider

__all__ = [
    "TokenProvider",
    "Mailer",
    "MailMessage",
    "MailTransportError",
    "SendResult",
    "InMemoryMailer",
]
