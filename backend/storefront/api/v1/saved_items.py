"""Save-for-later endpoints."""

from __future__ import annotations

from flask import Blueprint

from storefront.api.deps import json_body, json_response, saved_items_list, timing
from storefront.schemas import SaveForLaterSchema
from storefront.services import SavedItemIn

bp = Blueprint("saved_items", __name__)

save_schema = SaveForLaterSchema()


@bp.get("/saved-items/<user_id>")
@timing
def list_saved_items(user_id: str):
    """Return saved products as flat objects (snapshot fields plus ``productId``)."""

    items = saved_items_list().list_items(user_id)
    return json_response([i.as_product() for i in items])


@bp.post("/save-for-later/<user_id>")
@timing
def save_for_later(user_id: str):
    data = save_schema.load(json_body())
    saved_items_list().save(user_id, SavedItemIn(product=data.get("product") or {}))
    return json_response({"message": "Product saved for later."})


@bp.delete("/saved-items/<user_id>/<product_id>")
@timing
def delete_saved_item(user_id: str, product_id: str):
    saved_items_list().remove(user_id, product_id)
    return json_response({"message": "Item removed from saved items."})
