# storefront/services/addresses/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AddressIn:
    """
    Input DTO for a new address.

    String fields are stored exactly as received; duplicate detection
    compares them trimmed and case-folded.

    :param name: Recipient name.
    :param street: Street line.
    :param city: City.
    :param email: Contact email.
    :param mobile_no: Contact phone.
    :param house_no: House/flat number.
    :param postal_code: Postal code.
    :param is_default: Request this address become the default.
    """

    name: str
    street: str
    city: str
    email: str | None = None
    mobile_no: str | None = None
    house_no: str | None = None
    postal_code: str | None = None
    is_default: bool = False


@dataclass(frozen=True, slots=True)
class AddressOut:
    """Output DTO for one address book entry."""

    id: str
    name: str
    street: str
    city: str
    email: str | None
    mobile_no: str | None
    house_no: str | None
    postal_code: str | None
    is_default: bool
