"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, validate, validates

from .user import UserRefSchema


class RegisterSchema(Schema):
    """Input payload for account registration."""

    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))

    @validates("name")
    def reject_blank_name(self, value: str, **_: Any) -> None:
        if not value.strip():
            raise ValidationError("Name is required.")


class LoginSchema(Schema):
    """Input payload for authenticating a user."""

    email = fields.String(required=True, validate=validate.Length(min=1, max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class ChangePasswordSchema(Schema):
    """Input payload for ``POST /change-password``."""

    email = fields.String(required=True, validate=validate.Length(min=1, max=254))
    old_password = fields.String(
        required=True, data_key="oldPassword", validate=validate.Length(min=1, max=128)
    )
    new_password = fields.String(
        required=True, data_key="newPassword", validate=validate.Length(min=1, max=128)
    )


class RefreshSchema(Schema):
    """Input payload for ``POST /refresh-token``; absence is reported by the service."""

    refresh_token = fields.String(load_default="", data_key="refreshToken")


class PasswordResetRequestSchema(Schema):
    email = fields.String(required=True, validate=validate.Length(min=1, max=254))


class PasswordResetSchema(Schema):
    """Input payload for ``POST /reset-password``."""

    token = fields.String(required=True, validate=validate.Length(min=1, max=128))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class SessionResponseSchema(Schema):
    """Response payload for register and login."""

    message = fields.String(required=True)
    user = fields.Nested(UserRefSchema, required=True)
    token = fields.String(required=True, attribute="access_token")
    refresh_token = fields.String(required=True, data_key="refreshToken")


class RefreshResponseSchema(Schema):
    """Response payload for ``POST /refresh-token``."""

    success = fields.Boolean(dump_default=True)
    token = fields.String(required=True, attribute="access_token")
    refresh_token = fields.String(required=True, data_key="refreshToken")
    user = fields.Nested(UserRefSchema, required=True)
