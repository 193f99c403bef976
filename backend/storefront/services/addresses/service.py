# storefront/services/addresses/service.py
from __future__ import annotations

import logging

from storefront.models.address import IDENTITY_FIELDS, Address, normalize_field
from storefront.models.base import new_id
from storefront.models.user import User
from storefront.repositories.user import UserRepository
from storefront.services._shared.base import BaseService
from storefront.services._shared.errors import (
    AddressNotFoundError,
    DuplicateAddressError,
    NotFoundError,
)
from storefront.services.addresses.dto import AddressIn, AddressOut

logger = logging.getLogger(__name__)


class AddressBook(BaseService):
    """
    Per-user ordered address book.

    Invariants
    ----------
    - At most one entry has ``is_default``.
    - :meth:`set_default` leaves exactly one default.
    - :meth:`remove` forces the survivor default when exactly one is left;
      with zero or two-plus survivors the flags are left untouched.

    Every mutation is a single load-mutate-save inside one unit of work.
    There is no version check, so concurrent writers on the same user race.
    """

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def list_addresses(self, user_id: str) -> list[AddressOut]:
        """
        Return the user's addresses in insertion order.

        :raises NotFoundError: If the user does not exist.
        """
        with self.ro_uow() as uow:
            user = self._load_user(uow.users, user_id)
            return self._to_out(user)

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def add(self, user_id: str, dto: AddressIn) -> list[AddressOut]:
        """
        Append ``dto`` unless a normalized duplicate already exists.

        :returns: The updated list.
        :raises NotFoundError: If the user does not exist.
        :raises DuplicateAddressError: If every identity field matches an entry.
        """
        candidate = Address(
            id=new_id(),
            name=dto.name,
            email=dto.email,
            mobile_no=dto.mobile_no,
            house_no=dto.house_no,
            street=dto.street,
            city=dto.city,
            postal_code=dto.postal_code,
            is_default=bool(dto.is_default),
        )
        key = _identity_of(dto)

        with self.rw_uow() as uow:
            user = self._load_user(uow.users, user_id)
            if any(a.identity_key() == key for a in user.saved_addresses):
                raise DuplicateAddressError()

            if not user.saved_addresses:
                candidate.is_default = True
            elif candidate.is_default:
                for a in user.saved_addresses:
                    a.is_default = False

            user.saved_addresses.append(candidate)
            out = self._to_out(user)

        logger.info("Address saved", extra={"user_id": user_id, "address_id": candidate.id})
        return out

    def remove(self, user_id: str, address_id: str) -> list[AddressOut]:
        """
        Delete one address.

        :returns: The updated list.
        :raises NotFoundError: If the user does not exist.
        :raises AddressNotFoundError: If no entry has ``address_id``.
        """
        with self.rw_uow() as uow:
            user = self._load_user(uow.users, user_id)
            target = self._find(user, address_id)
            user.saved_addresses.remove(target)

            remaining = user.saved_addresses
            if len(remaining) == 1:
                remaining[0].is_default = True
            out = self._to_out(user)

        logger.info("Address removed", extra={"user_id": user_id, "address_id": address_id})
        return out

    def set_default(self, user_id: str, address_id: str) -> list[AddressOut]:
        """
        Make ``address_id`` the only default.

        :returns: The updated list.
        :raises NotFoundError: If the user does not exist.
        :raises AddressNotFoundError: If no entry has ``address_id``.
        """
        with self.rw_uow() as uow:
            user = self._load_user(uow.users, user_id)
            target = self._find(user, address_id)
            for a in user.saved_addresses:
                a.is_default = False
            target.is_default = True
            out = self._to_out(user)

        logger.info("Default address set", extra={"user_id": user_id, "address_id": address_id})
        return out

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _load_user(repo: UserRepository, user_id: str) -> User:
        user = repo.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    @staticmethod
    def _find(user: User, address_id: str) -> Address:
        for a in user.saved_addresses:
            if a.id == address_id:
                return a
        raise AddressNotFoundError(address_id)

    @staticmethod
    def _to_out(user: User) -> list[AddressOut]:
        return [
            AddressOut(
                id=a.id,
                name=a.name,
                street=a.street,
                city=a.city,
                email=a.email,
                mobile_no=a.mobile_no,
                house_no=a.house_no,
                postal_code=a.postal_code,
                is_default=bool(a.is_default),
            )
            for a in user.saved_addresses
        ]


def _identity_of(dto: AddressIn) -> tuple[str, ...]:
    return tuple(normalize_field(getattr(dto, f)) for f in IDENTITY_FIELDS)
