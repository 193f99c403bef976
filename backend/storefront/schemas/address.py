"""Address book schemas (legacy camelCase wire names)."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

# Contact fields older clients send as JSON numbers
NUMERIC_TEXT_KEYS = ("mobileNo", "houseNo", "postalCode")


class AddressCreateSchema(Schema):
    """Payload for ``POST /addresses/<userId>``.

    Unknown keys (``_id`` echoed back by clients, UI-only flags) are dropped.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    email = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=254))
    mobile_no = fields.String(
        load_default=None, allow_none=True, data_key="mobileNo", validate=validate.Length(max=32)
    )
    house_no = fields.String(
        load_default=None, allow_none=True, data_key="houseNo", validate=validate.Length(max=32)
    )
    street = fields.String(required=True, validate=validate.Length(min=1, max=200))
    city = fields.String(required=True, validate=validate.Length(min=1, max=100))
    postal_code = fields.String(
        load_default=None, allow_none=True, data_key="postalCode", validate=validate.Length(max=20)
    )
    is_default = fields.Boolean(load_default=False, data_key="isDefault")

    @pre_load
    def stringify_numbers(self, data: Any, **_: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in NUMERIC_TEXT_KEYS:
            value = data.get(key)
            if isinstance(value, int | float) and not isinstance(value, bool):
                data[key] = str(value)
        return data


class AddressSchema(Schema):
    """Public representation of one saved address."""

    id = fields.String(required=True, data_key="_id")
    name = fields.String(required=True)
    email = fields.String(allow_none=True)
    mobile_no = fields.String(allow_none=True, data_key="mobileNo")
    house_no = fields.String(allow_none=True, data_key="houseNo")
    street = fields.String(required=True)
    city = fields.String(required=True)
    postal_code = fields.String(allow_none=True, data_key="postalCode")
    is_default = fields.Boolean(required=True, data_key="isDefault")


class AddressListResponseSchema(Schema):
    """``{message, savedAddresses}`` envelope returned by address mutations."""

    message = fields.String(required=True)
    saved_addresses = fields.List(
        fields.Nested(AddressSchema), required=True, data_key="savedAddresses"
    )
