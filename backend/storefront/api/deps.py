"""Shared API helpers for request parsing, service wiring and cross-cutting concerns."""

from __future__ import annotations

import functools
import re
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from storefront.core.errors import BadRequest
from storefront.core.extensions import get_mailer
from storefront.infra.jwt.pyjwt_token_provider import PyJWTTokenProvider
from storefront.services import (
    AddressBook,
    AuthGateway,
    NotificationService,
    PasswordResetFlow,
    SavedItemsList,
    TokenConfig,
    TokenService,
)

F = TypeVar("F", bound=Callable[..., Any])

_HEX_ID = re.compile(r"^[0-9a-f]{32}$")


# ------------------------------ Request parsing ------------------------------


def json_body() -> dict[str, Any]:
    """Return the JSON object body, or ``{}`` for a missing/non-object body."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def bearer_token() -> str:
    """Extract the token from ``Authorization: Bearer <token>`` (``""`` if absent)."""

    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def is_hex_id(value: str) -> bool:
    """Return ``True`` for store-assigned ids (32 lowercase hex characters)."""

    return bool(_HEX_ID.match(value or ""))


def require_hex_ids(*values: str, message: str = "Invalid userId or addressId") -> None:
    """Reject malformed path ids with ``400`` before touching the database."""

    if not all(is_hex_id(v) for v in values):
        raise BadRequest(message, code="invalid_id")


# ------------------------------ Service wiring -------------------------------


def token_service() -> TokenService:
    """Build a :class:`TokenService` from the application config."""

    cfg = current_app.config
    return TokenService(
        provider=PyJWTTokenProvider(),
        config=TokenConfig(
            access_secret=cfg["JWT_ACCESS_SECRET"],
            refresh_secret=cfg["JWT_REFRESH_SECRET"],
            access_expires=timedelta(seconds=int(cfg["ACCESS_TOKEN_EXPIRES"])),
            refresh_expires=timedelta(seconds=int(cfg["REFRESH_TOKEN_EXPIRES"])),
        ),
    )


def auth_gateway() -> AuthGateway:
    return AuthGateway(tokens=token_service())


def notification_service() -> NotificationService:
    return NotificationService(
        mailer=get_mailer(current_app),
        sender=current_app.config["MAIL_FROM"],
    )


def password_reset_flow() -> PasswordResetFlow:
    cfg = current_app.config
    return PasswordResetFlow(
        notifications=notification_service(),
        reset_url=cfg["PASSWORD_RESET_URL"],
        ttl=timedelta(seconds=int(cfg["PASSWORD_RESET_TTL"])),
    )


def address_book() -> AddressBook:
    return AddressBook()


def saved_items_list() -> SavedItemsList:
    return SavedItemsList()


# ------------------------------ Responses ------------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
