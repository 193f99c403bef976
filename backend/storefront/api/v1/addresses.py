"""Address book endpoints."""

from __future__ import annotations

from flask import Blueprint

from storefront.api.deps import address_book, json_body, json_response, require_hex_ids, timing
from storefront.schemas import AddressCreateSchema, AddressListResponseSchema, AddressSchema
from storefront.services import AddressIn

bp = Blueprint("addresses", __name__)

create_schema = AddressCreateSchema()
address_schema = AddressSchema()
list_response_schema = AddressListResponseSchema()


def _envelope(message: str, addresses) -> dict:
    return list_response_schema.dump({"message": message, "saved_addresses": addresses})


@bp.get("/addresses/<user_id>")
@timing
def list_addresses(user_id: str):
    addresses = address_book().list_addresses(user_id)
    return json_response(address_schema.dump(addresses, many=True))


@bp.post("/addresses/<user_id>")
@timing
def add_address(user_id: str):
    """Save a new address unless an equivalent one already exists (409)."""

    data = create_schema.load(json_body())
    addresses = address_book().add(user_id, AddressIn(**data))
    return json_response(_envelope("Address saved successfully.", addresses), status=201)


@bp.delete("/addresses/<user_id>/<address_id>")
@timing
def delete_address(user_id: str, address_id: str):
    require_hex_ids(user_id, address_id)
    addresses = address_book().remove(user_id, address_id)
    return json_response(_envelope("Address deleted successfully", addresses))


@bp.put("/addresses/<user_id>/default/<address_id>")
@timing
def set_default_address(user_id: str, address_id: str):
    require_hex_ids(user_id, address_id)
    addresses = address_book().set_default(user_id, address_id)
    return json_response(_envelope("Default address updated successfully", addresses))
