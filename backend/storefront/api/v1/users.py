"""User lookup endpoints."""

from __future__ import annotations

from flask import Blueprint

from storefront.api.deps import auth_gateway, bearer_token, json_response, timing
from storefront.schemas import UserDetailsSchema, UserRefSchema

bp = Blueprint("users", __name__)

details_schema = UserDetailsSchema()
user_schema = UserRefSchema()


@bp.get("/user/details")
@timing
def user_details():
    """Return the user behind the bearer access token."""

    user = auth_gateway().current_user(bearer_token())
    return json_response(details_schema.dump(user))


@bp.get("/users/<user_id>")
@timing
def get_user(user_id: str):
    """Return the sanitized view of a user (never credential material)."""

    user = auth_gateway().get_user(user_id)
    return json_response(user_schema.dump(user))
