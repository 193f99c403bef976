"""User model definition for the storefront."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import Index, String, Text, UniqueConstraint
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from werkzeug.security import check_password_hash, generate_password_hash

from storefront.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin, UTCDateTime

if TYPE_CHECKING:
    from .address import Address
    from .saved_item import SavedItem


def normalize_email(value: str) -> str:
    """Return the canonical (trimmed, lowercased) form of an email address."""
    return value.strip().lower()


class User(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Storefront account: credentials, session state and owned collections.

    Fields
    ------
    email : str
        Login email. Stored normalized (lowercase, trimmed).
    password_hash : str
        Salted hash (write-only setter via ``password``).
    name : str
        Display name.
    reset_token : str | None
        Pending password reset token (single use).
    reset_token_expiration : datetime | None
        Instant after which ``reset_token`` is no longer accepted.
    refresh_token : str | None
        Latest refresh token issued; any other value is rejected.
    saved_addresses : list[Address]
        Shipping addresses in insertion order.
    saved_items : list[SavedItem]
        Products saved for later in insertion order.
    """

    __tablename__ = "users"

    # Columns
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    reset_token: Mapped[str | None] = mapped_column(String(64), nullable=True)
    reset_token_expiration: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    refresh_token: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Owned collections (document-style: deleted with the user)
    saved_addresses: Mapped[list[Address]] = relationship(
        back_populates="user",
        order_by="Address.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    saved_items: Mapped[list[SavedItem]] = relationship(
        back_populates="user",
        order_by="SavedItem.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    # Constraints & indexes
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        Index("ix_users_email", "email"),
        Index("ix_users_reset_token", "reset_token"),
    )

    # -------------------- Password API --------------------
    @property
    def password(self) -> Any:  # pragma: no cover - explicit write-only contract
        """
        Disallow reading passwords.

        :raises AttributeError: Always, to ensure password is write-only.
        """
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, raw: str) -> None:
        """
        Hash and set the password.

        :param raw: Plain text password to hash.
        :type raw: str
        """
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        self.password_hash = generate_password_hash(raw)

    def verify_password(self, raw: str) -> bool:
        """
        Verify a password against the stored hash.

        :param raw: Plain text password candidate.
        :type raw: str
        :returns: ``True`` if it matches; otherwise ``False``.
        :rtype: bool
        """
        if not self.password_hash or not raw:
            return False
        return bool(check_password_hash(self.password_hash, raw))

    # -------------------- Reset token API --------------------
    def clear_reset_token(self) -> None:
        """Drop the pending reset token and its expiry together."""
        self.reset_token = None
        self.reset_token_expiration = None

    # -------------------- Validators --------------------
    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize and validate email.

        :param key: Field name (``email``).
        :type key: str
        :param value: Email to normalize.
        :type value: str
        :returns: Normalized email (lowercased/trimmed).
        :rtype: str
        :raises ValueError: If email is missing or malformed.
        """
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        v = normalize_email(value)
        # Minimal sanity check; full validation happens at API layer.
        if "@" not in v or "." not in v.split("@")[-1]:
            raise ValueError("Email format looks invalid.")
        return v

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        """
        Trim the display name.

        :raises ValueError: If the name is missing or only whitespace.
        """
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Name is required.")
        return value.strip()
