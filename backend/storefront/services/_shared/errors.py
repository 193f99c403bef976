"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between repositories,
domain models, and application services.

The translation to HTTP responses (RFC 7807) is handled by
``storefront/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_users_email').

    Returns
    -------
    bool
        True if the IntegrityError mentions the given constraint. SQLite
        reports the column instead (``users.email``), so the column suffix of
        the constraint name is accepted as well.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    name = constraint_name.lower()
    if name in message:
        return True
    # uq_users_email -> users.email
    parts = name.split("_")
    if len(parts) >= 3 and parts[0] == "uq":
        return f"{parts[1]}.{'_'.join(parts[2:])}" in message
    return False


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - Subclasses without a dedicated mapping translate to ``400``.
    """

    pass


# --------------------------------------------------------------------------- #
# Lookups
# --------------------------------------------------------------------------- #


@dataclass(eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:
        return f"{self.entity} not found"


class AddressNotFoundError(NotFoundError):
    def __init__(self, address_id: str) -> None:
        super().__init__("Address", address_id)


class ItemNotFoundError(NotFoundError):
    def __init__(self, product_id: str) -> None:
        super().__init__("Saved item", product_id)

    def __str__(self) -> str:
        return "Product not found in saved items."


# --------------------------------------------------------------------------- #
# Uniqueness
# --------------------------------------------------------------------------- #


@dataclass(eq=False)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Address").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return self.detail


class DuplicateAddressError(ConflictError):
    def __init__(self) -> None:
        super().__init__("Address", "Duplicate address detected.")


class UserExistsError(ConflictError):
    """Email already registered. Reported as 400 by the legacy contract."""

    def __init__(self) -> None:
        super().__init__("User", "User already exists")


class AlreadySavedError(ConflictError):
    """Product already in the saved-items list. Reported as 400."""

    def __init__(self, product_id: str) -> None:
        super().__init__("Saved item", "Product already saved.")
        self.product_id = product_id


# --------------------------------------------------------------------------- #
# Input validation
# --------------------------------------------------------------------------- #


class InvalidProductError(ServiceError):
    """Product payload lacks ``productId`` or images."""


class IncorrectOldPasswordError(ServiceError):
    def __init__(self) -> None:
        super().__init__("Incorrect old password")


class InvalidOrExpiredTokenError(ServiceError):
    """Password reset token unknown, already consumed or past its expiry."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


# --------------------------------------------------------------------------- #
# Authentication
# --------------------------------------------------------------------------- #


class AuthenticationError(ServiceError):
    """Caller could not be authenticated (maps to 401)."""


class InvalidCredentialsError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class TokenInvalidError(AuthenticationError):
    """
    Token failed verification.

    Bad signature, expiry and malformed payloads share this single outcome so
    callers learn nothing about which check failed.
    """

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


class RefreshRejectedError(ServiceError):
    """Refresh token presented but not accepted (maps to 403)."""


# --------------------------------------------------------------------------- #
# Downstream
# --------------------------------------------------------------------------- #


class MailDeliveryError(ServiceError):
    """Outgoing mail could not be handed to the transport (maps to 500)."""
