# storefront/services/tokens/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


@dataclass(frozen=True, slots=True)
class Claim:
    """
    Verified token payload.

    :param user_id: Subject the token was issued for.
    :type user_id: str
    :param expires_at: Absolute expiry (UTC).
    :type expires_at: datetime
    :param token_type: ``"access"`` or ``"refresh"``.
    :type token_type: str
    """

    user_id: str
    expires_at: datetime
    token_type: str


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """
    Signing keys and lifetimes.

    :param access_secret: Key for access tokens.
    :type access_secret: str
    :param refresh_secret: Distinct key for refresh tokens.
    :type refresh_secret: str
    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    """

    access_secret: str
    refresh_secret: str
    access_expires: timedelta = timedelta(hours=1)
    refresh_expires: timedelta = timedelta(days=30)

    def __post_init__(self) -> None:
        if not self.access_secret or not self.refresh_secret:
            raise ValueError("Token secrets must be non-empty.")
        if self.access_secret == self.refresh_secret:
            raise ValueError("Access and refresh secrets must differ.")
