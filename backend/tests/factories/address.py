"""Factory Boy definition for :class:`storefront.models.address.Address`."""

from __future__ import annotations

import factory
from storefront.models.address import Address

from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class AddressFactory(BaseFactory):
    """
    Persist an address directly, bypassing the address book rules.

    Useful to arrange states the service would never produce on its own
    (e.g. several addresses and no default).
    """

    class Meta:
        model = Address

    user = factory.SubFactory(UserFactory)
    position = factory.Sequence(lambda n: n)
    name = factory.Faker("name")
    email = factory.Sequence(lambda n: f"ship{n}@example.com")
    mobile_no = factory.Sequence(lambda n: f"0100{n:07d}")
    house_no = factory.Sequence(lambda n: str(n + 1))
    street = factory.Faker("street_name")
    city = factory.Faker("city")
    postal_code = factory.Faker("postcode")
    is_default = False
