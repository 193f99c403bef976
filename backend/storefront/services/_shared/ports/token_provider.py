from __future__ import annotations

from typing import Any, Protocol


class TokenProvider(Protocol):
    """
    Port for signing and decoding compact JWTs.

    Implementations MUST raise
    :class:`~storefront.services._shared.errors.TokenInvalidError` from
    :meth:`decode` for every failure (bad signature, expiry, malformed input)
    without distinguishing between them.
    """

    def encode(self, claims: dict[str, Any], *, secret: str) -> str: ...

    def decode(self, token: str, *, secret: str) -> dict[str, Any]: ...
