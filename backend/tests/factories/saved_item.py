"""Factory Boy definition for :class:`storefront.models.saved_item.SavedItem`."""

from __future__ import annotations

import factory
from storefront.models.saved_item import SavedItem

from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class SavedItemFactory(BaseFactory):
    class Meta:
        model = SavedItem

    user = factory.SubFactory(UserFactory)
    position = factory.Sequence(lambda n: n)
    product_id = factory.Sequence(lambda n: f"P{n}")
    snapshot = factory.LazyFunction(
        lambda: {"name": "Canvas print", "images": ["a.jpg"], "price": 49.9}
    )
