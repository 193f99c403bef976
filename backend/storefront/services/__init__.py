"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`storefront.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``storefront.services._shared.base``)
    * :class:`BaseService`

- Shared DTOs (from ``storefront.services._shared.dto``)
    * :class:`UserPublicOut`

- Tokens (from ``storefront.services.tokens``)
    * :class:`TokenService`
    * DTOs: :class:`Claim`, :class:`TokenConfig`

- Accounts (from ``storefront.services.auth``)
    * :class:`AuthGateway`
    * DTOs: :class:`RegisterIn`, :class:`LoginIn`, :class:`PasswordChangeIn`,
      :class:`AuthResultOut`

- Password reset (from ``storefront.services.password_reset``)
    * :class:`PasswordResetFlow`
    * DTOs: :class:`ResetRequestIn`, :class:`ResetConsumeIn`, :class:`ResetTicketOut`

- Address book (from ``storefront.services.addresses``)
    * :class:`AddressBook`
    * DTOs: :class:`AddressIn`, :class:`AddressOut`

- Saved items (from ``storefront.services.saved_items``)
    * :class:`SavedItemsList`
    * DTOs: :class:`SavedItemIn`, :class:`SavedItemOut`

- Notifications (from ``storefront.services.notifications``)
    * :class:`NotificationService`
"""

from __future__ import annotations

# Base primitives
from ._shared.base import BaseService

# Shared DTOs
from ._shared.dto import UserPublicOut

# Address book
from .addresses.dto import AddressIn, AddressOut
from .addresses.service import AddressBook

# Accounts
from .auth.dto import AuthResultOut, LoginIn, PasswordChangeIn, RegisterIn
from .auth.service import AuthGateway

# Notifications
from .notifications.service import NotificationService

# Password reset
from .password_reset.dto import ResetConsumeIn, ResetRequestIn, ResetTicketOut
from .password_reset.service import PasswordResetFlow

# Saved items
from .saved_items.dto import SavedItemIn, SavedItemOut
from .saved_items.service import SavedItemsList

# Tokens
from .tokens.dto import Claim, TokenConfig
from .tokens.service import TokenService

__all__ = [
    # Base
    "BaseService",
    "UserPublicOut",
    # Tokens
    "TokenService",
    "Claim",
    "TokenConfig",
    # Accounts
    "AuthGateway",
    "RegisterIn",
    "LoginIn",
    "PasswordChangeIn",
    "AuthResultOut",
    # Password reset
    "PasswordResetFlow",
    "ResetRequestIn",
    "ResetConsumeIn",
    "ResetTicketOut",
    # Address book
    "AddressBook",
    "AddressIn",
    "AddressOut",
    # Saved items
    "SavedItemsList",
    "SavedItemIn",
    "SavedItemOut",
    # Notifications
    "NotificationService",
]
