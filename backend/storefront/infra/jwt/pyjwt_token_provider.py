# storefront/infra/jwt/pyjwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

import jwt

from storefront.services._shared.errors import TokenInvalidError
from storefront.services._shared.ports import TokenProvider


@dataclass(slots=True)
class PyJWTTokenProvider(TokenProvider):
    """
    Adapter over PyJWT.

    The secret is passed per call so access and refresh tokens can be signed
    with distinct keys.

    .. note::
       ``exp`` is always required on decode; a token without it is rejected
       like an expired one.
    """

    algorithm: str = "HS256"
    leeway: int = 0

    def encode(self, claims: dict[str, Any], *, secret: str) -> str:
        return cast(str, jwt.encode(claims, secret, algorithm=self.algorithm))

    def decode(self, token: str, *, secret: str) -> dict[str, Any]:
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                leeway=self.leeway,
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as exc:
            # Single outcome for every failure: no hint about which check failed.
            raise TokenInvalidError() from exc
        return cast(dict[str, Any], payload)
