"""Save-for-later schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class SaveForLaterSchema(Schema):
    """Payload for ``POST /save-for-later/<userId>``: ``{"product": {...}}``.

    The product object is kept verbatim; its shape is checked by the service.
    """

    class Meta:
        unknown = EXCLUDE

    product = fields.Dict(keys=fields.String(), load_default=None, allow_none=True)
