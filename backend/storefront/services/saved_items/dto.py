# storefront/services/saved_items/dto.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class SavedItemIn:
    """
    Input DTO wrapping the product object posted by the storefront.

    :param product: Raw product payload (``productId``, ``images``, name,
        price...). Unknown fields are kept verbatim in the snapshot.
    :type product: Mapping[str, Any]
    """

    product: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SavedItemOut:
    """
    Output DTO for one saved item.

    :param product_id: Catalogue identifier.
    :type product_id: str
    :param snapshot: Product fields as saved (without ``productId``).
    :type snapshot: dict[str, Any]
    """

    product_id: str
    snapshot: dict[str, Any]

    def as_product(self) -> dict[str, Any]:
        return {**self.snapshot, "productId": self.product_id}
