# storefront/services/password_reset/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ResetRequestIn:
    """
    Input DTO for requesting a reset link.

    :param email: Account email (normalized by the lookup).
    :type email: str
    """

    email: str


@dataclass(frozen=True, slots=True)
class ResetConsumeIn:
    """
    Input DTO for consuming a reset token.

    :param token: Token received by e-mail.
    :type token: str
    :param new_password: Raw replacement password.
    :type new_password: str
    """

    token: str
    new_password: str


@dataclass(frozen=True, slots=True)
class ResetTicketOut:
    """
    Output DTO describing the issued reset token.

    Never serialized to HTTP clients; the token only travels by e-mail.

    :param token: 64 hex chars (256 bits of entropy).
    :type token: str
    :param expires_at: Expiry instant (UTC).
    :type expires_at: datetime
    """

    token: str
    expires_at: datetime
