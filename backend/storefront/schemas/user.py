"""User resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class UserRefSchema(Schema):
    """Sanitized user embedded in session responses and ``GET /users/<id>``."""

    id = fields.String(required=True, data_key="_id")
    name = fields.String(required=True)
    email = fields.String(required=True)


class UserDetailsSchema(Schema):
    """Response payload for ``GET /user/details``."""

    id = fields.String(required=True, data_key="userId")
    name = fields.String(required=True)
    email = fields.String(required=True)
