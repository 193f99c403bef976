# storefront/services/saved_items/service.py
from __future__ import annotations

import logging
from typing import Any

from storefront.models.base import new_id
from storefront.models.saved_item import SavedItem
from storefront.models.user import User
from storefront.repositories.user import UserRepository
from storefront.services._shared.base import BaseService
from storefront.services._shared.errors import (
    AlreadySavedError,
    InvalidProductError,
    ItemNotFoundError,
    NotFoundError,
)
from storefront.services.saved_items.dto import SavedItemIn, SavedItemOut

logger = logging.getLogger(__name__)

# Width of ``saved_items.product_id``
PRODUCT_ID_MAX_LENGTH = 64


class SavedItemsList(BaseService):
    """
    Per-user "save for later" list, unique by ``productId``.

    Product identifiers must be strings and are compared exactly (no trimming,
    case folding or type coercion).
    """

    def list_items(self, user_id: str) -> list[SavedItemOut]:
        """
        Return saved items in insertion order.

        :raises NotFoundError: If the user does not exist.
        """
        with self.ro_uow() as uow:
            user = self._load_user(uow.users, user_id)
            return [self._to_out(i) for i in user.saved_items]

    def save(self, user_id: str, dto: SavedItemIn) -> SavedItemOut:
        """
        Append a product snapshot.

        :raises InvalidProductError: ``productId`` absent or no images.
        :raises NotFoundError: If the user does not exist.
        :raises AlreadySavedError: If ``productId`` is already in the list.
        """
        product_id, snapshot = self._validate(dto.product)

        with self.rw_uow() as uow:
            user = self._load_user(uow.users, user_id)
            if any(i.product_id == product_id for i in user.saved_items):
                raise AlreadySavedError(product_id)
            item = SavedItem(id=new_id(), product_id=product_id, snapshot=snapshot)
            user.saved_items.append(item)
            out = self._to_out(item)

        logger.info("Product saved for later", extra={"user_id": user_id, "product_id": product_id})
        return out

    def remove(self, user_id: str, product_id: str) -> None:
        """
        Drop every entry matching ``product_id``.

        :raises NotFoundError: If the user does not exist.
        :raises ItemNotFoundError: If nothing matched.
        """
        with self.rw_uow() as uow:
            user = self._load_user(uow.users, user_id)
            matches = [i for i in user.saved_items if i.product_id == product_id]
            if not matches:
                raise ItemNotFoundError(product_id)
            for item in matches:
                user.saved_items.remove(item)

        logger.info("Saved item removed", extra={"user_id": user_id, "product_id": product_id})

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _validate(product) -> tuple[str, dict[str, Any]]:
        if not product:
            raise InvalidProductError("Invalid Product Data")
        product_id = product.get("productId")
        if not isinstance(product_id, str) or not product_id:
            raise InvalidProductError("Invalid Product Data")
        if len(product_id) > PRODUCT_ID_MAX_LENGTH:
            raise InvalidProductError("Invalid Product Data")

        images = product.get("images")
        if not isinstance(images, list) or not images:
            raise InvalidProductError("Product must include images.")

        snapshot = {k: v for k, v in product.items() if k != "productId"}
        return product_id, snapshot

    @staticmethod
    def _load_user(repo: UserRepository, user_id: str) -> User:
        user = repo.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    @staticmethod
    def _to_out(item: SavedItem) -> SavedItemOut:
        return SavedItemOut(product_id=item.product_id, snapshot=dict(item.snapshot or {}))
