"""Saved shipping address owned by a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.core.extensions import db

from .base import PKMixin, ReprMixin

if TYPE_CHECKING:
    from .user import User

# Fields compared (trimmed, case-folded) when detecting duplicate addresses
IDENTITY_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "mobile_no",
    "house_no",
    "street",
    "city",
    "postal_code",
)


def normalize_field(value: str | None) -> str:
    """Return the comparison form of an address field."""
    return (value or "").strip().casefold()


class Address(PKMixin, ReprMixin, db.Model):
    """
    One entry of a user's address book.

    Stored values keep the casing and whitespace the client sent; only
    duplicate detection works on the normalized form.
    """

    __tablename__ = "addresses"

    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    mobile_no: Mapped[str | None] = mapped_column(String(32), nullable=True)
    house_no: Mapped[str | None] = mapped_column(String(32), nullable=True)
    street: Mapped[str] = mapped_column(String(200), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    user: Mapped[User] = relationship(back_populates="saved_addresses")

    def identity_key(self) -> tuple[str, ...]:
        """Return the normalized tuple used for duplicate detection."""
        return tuple(normalize_field(getattr(self, f)) for f in IDENTITY_FIELDS)
