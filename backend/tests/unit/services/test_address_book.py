# tests/unit/services/test_address_book.py
from __future__ import annotations

import pytest
from storefront.services import AddressBook, AddressIn
from storefront.services._shared.errors import (
    AddressNotFoundError,
    DuplicateAddressError,
    NotFoundError,
)

from tests.factories.address import AddressFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def book() -> AddressBook:
    return AddressBook()


def _home(**overrides) -> AddressIn:
    data = {
        "name": "Ada Lovelace",
        "street": "12 Analytical Row",
        "city": "London",
        "email": "ada@example.com",
        "mobile_no": "07000000001",
        "house_no": "12",
        "postal_code": "N1 9GU",
    }
    data.update(overrides)
    return AddressIn(**data)


def _defaults(entries) -> list[str]:
    return [a.id for a in entries if a.is_default]


def test_first_address_becomes_default(book):
    user = UserFactory()

    [entry] = book.add(user.id, _home())

    assert entry.is_default is True
    assert len(entry.id) == 32


def test_add_keeps_insertion_order_and_single_default(book):
    user = UserFactory()
    book.add(user.id, _home())
    book.add(user.id, _home(street="1 Other St"))
    entries = book.add(user.id, _home(street="2 Other St"))

    assert [a.street for a in entries] == ["12 Analytical Row", "1 Other St", "2 Other St"]
    assert _defaults(entries) == [entries[0].id]
    assert book.list_addresses(user.id) == entries


def test_add_with_default_flag_takes_over(book):
    user = UserFactory()
    book.add(user.id, _home())

    entries = book.add(user.id, _home(street="9 New Rd", is_default=True))

    assert _defaults(entries) == [entries[1].id]


def test_duplicate_detection_ignores_case_and_whitespace(book):
    user = UserFactory()
    book.add(user.id, _home())

    with pytest.raises(DuplicateAddressError):
        book.add(user.id, _home(name="  ADA lovelace ", city="london "))

    assert len(book.list_addresses(user.id)) == 1


def test_values_stored_verbatim(book):
    user = UserFactory()

    [entry] = book.add(user.id, _home(name="  Ada  "))

    assert entry.name == "  Ada  "


def test_missing_optional_fields_compare_as_empty(book):
    user = UserFactory()
    book.add(user.id, AddressIn(name="Bo", street="S", city="C"))

    with pytest.raises(DuplicateAddressError):
        book.add(user.id, AddressIn(name="bo", street="s", city="c", email=""))


def test_set_default_leaves_exactly_one(book):
    user = UserFactory()
    book.add(user.id, _home())
    book.add(user.id, _home(street="B"))
    entries = book.add(user.id, _home(street="C"))

    result = book.set_default(user.id, entries[2].id)

    assert _defaults(result) == [entries[2].id]


def test_set_default_recovers_from_no_default(book):
    owner = UserFactory()
    first = AddressFactory(user=owner)
    AddressFactory(user=owner)

    result = book.set_default(owner.id, first.id)

    assert _defaults(result) == [first.id]


def test_remove_last_but_one_promotes_survivor(book):
    user = UserFactory()
    book.add(user.id, _home())
    entries = book.add(user.id, _home(street="B"))

    result = book.remove(user.id, entries[0].id)

    assert [a.id for a in result] == [entries[1].id]
    assert result[0].is_default is True


def test_remove_default_with_two_survivors_leaves_none(book):
    user = UserFactory()
    book.add(user.id, _home())
    book.add(user.id, _home(street="B"))
    entries = book.add(user.id, _home(street="C"))

    result = book.remove(user.id, entries[0].id)

    assert len(result) == 2
    assert _defaults(result) == []


def test_remove_only_address(book):
    user = UserFactory()
    [entry] = book.add(user.id, _home())

    assert book.remove(user.id, entry.id) == []


def test_unknown_address(book):
    user = UserFactory()
    book.add(user.id, _home())

    with pytest.raises(AddressNotFoundError, match="Address not found"):
        book.remove(user.id, "f" * 32)
    with pytest.raises(AddressNotFoundError):
        book.set_default(user.id, "f" * 32)


def test_other_users_address_is_not_found(book):
    alice, bob = UserFactory(), UserFactory()
    [entry] = book.add(alice.id, _home())

    with pytest.raises(AddressNotFoundError):
        book.set_default(bob.id, entry.id)


def test_unknown_user(book):
    with pytest.raises(NotFoundError, match="User not found"):
        book.list_addresses("0" * 32)
    with pytest.raises(NotFoundError):
        book.add("0" * 32, _home())


def test_remove_from_two_non_defaults_promotes_survivor(book):
    owner = UserFactory()
    first = AddressFactory(user=owner)
    second = AddressFactory(user=owner)

    result = book.remove(owner.id, first.id)

    assert [(a.id, a.is_default) for a in result] == [(second.id, True)]
