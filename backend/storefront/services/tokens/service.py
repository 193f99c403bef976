# storefront/services/tokens/service.py
from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

from storefront.services._shared.errors import TokenInvalidError
from storefront.services._shared.ports import TokenProvider
from storefront.services.tokens.dto import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    Claim,
    TokenConfig,
)


class TokenService:
    """
    Issue and verify stateless bearer tokens.

    Access tokens live one hour and refresh tokens thirty days by default,
    each signed with its own secret. Validity is purely signature + expiry;
    the refresh cross-check against the stored value belongs to
    :class:`~storefront.services.auth.service.AuthGateway`.
    """

    def __init__(
        self,
        *,
        provider: TokenProvider,
        config: TokenConfig,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        :param provider: JWT adapter.
        :param config: Secrets and lifetimes.
        :param clock: Callable returning the current UTC instant.
        """
        self.provider = provider
        self.cfg = config
        self._clock = clock or (lambda: datetime.now(UTC))

    # ------------------------------------------------------------------ #
    # Issue
    # ------------------------------------------------------------------ #

    def _issue(self, user_id: str, *, token_type: str, secret: str, ttl: timedelta) -> str:
        now = self._clock()
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "userId": str(user_id),
            "type": token_type,
            # Random jti keeps two tokens minted in the same second distinct.
            "jti": uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        return self.provider.encode(claims, secret=secret)

    def issue_access_token(self, user_id: str) -> str:
        """
        Sign a short-lived access token for ``user_id``.

        :param user_id: Subject identifier.
        :returns: Encoded JWT.
        :rtype: str
        """
        return self._issue(
            user_id,
            token_type=ACCESS_TOKEN_TYPE,
            secret=self.cfg.access_secret,
            ttl=self.cfg.access_expires,
        )

    def issue_refresh_token(self, user_id: str) -> str:
        """
        Sign a long-lived refresh token for ``user_id``.

        :param user_id: Subject identifier.
        :returns: Encoded JWT.
        :rtype: str
        """
        return self._issue(
            user_id,
            token_type=REFRESH_TOKEN_TYPE,
            secret=self.cfg.refresh_secret,
            ttl=self.cfg.refresh_expires,
        )

    # ------------------------------------------------------------------ #
    # Verify
    # ------------------------------------------------------------------ #

    def verify(self, token: str, secret: str) -> Claim:
        """
        Verify ``token`` against ``secret`` and return its typed claim.

        :param token: Encoded JWT.
        :param secret: Key the token is expected to be signed with.
        :returns: Parsed claim.
        :rtype: Claim
        :raises TokenInvalidError: Bad signature, expired, or malformed payload.
        """
        if not token:
            raise TokenInvalidError()
        payload = self.provider.decode(token, secret=secret)

        user_id = payload.get("userId", payload.get("sub"))
        exp = payload.get("exp")
        if not isinstance(user_id, str) or not user_id or not isinstance(exp, int | float):
            raise TokenInvalidError()
        return Claim(
            user_id=user_id,
            expires_at=datetime.fromtimestamp(exp, tz=UTC),
            token_type=str(payload.get("type", "")),
        )

    def verify_access(self, token: str) -> Claim:
        return self._verify_typed(token, self.cfg.access_secret, ACCESS_TOKEN_TYPE)

    def verify_refresh(self, token: str) -> Claim:
        return self._verify_typed(token, self.cfg.refresh_secret, REFRESH_TOKEN_TYPE)

    def _verify_typed(self, token: str, secret: str, expected: str) -> Claim:
        claim = self.verify(token, secret)
        if claim.token_type != expected:
            raise TokenInvalidError()
        return claim
