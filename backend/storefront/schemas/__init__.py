"""Convenience exports for application schemas."""

from __future__ import annotations

from .address import AddressCreateSchema, AddressListResponseSchema, AddressSchema
from .auth import (
    ChangePasswordSchema,
    LoginSchema,
    PasswordResetRequestSchema,
    PasswordResetSchema,
    RefreshResponseSchema,
    RefreshSchema,
    RegisterSchema,
    SessionResponseSchema,
)
from .saved_item import SaveForLaterSchema
from .user import UserDetailsSchema, UserRefSchema

__all__ = [
    "RegisterSchema",
    "LoginSchema",
    "ChangePasswordSchema",
    "RefreshSchema",
    "PasswordResetRequestSchema",
    "PasswordResetSchema",
    "SessionResponseSchema",
    "RefreshResponseSchema",
    "UserRefSchema",
    "UserDetailsSchema",
    "AddressCreateSchema",
    "AddressSchema",
    "AddressListResponseSchema",
    "SaveForLaterSchema",
]
