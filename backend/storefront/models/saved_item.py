"""Product saved for later by a user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.core.extensions import db

from .base import PKMixin, ReprMixin

if TYPE_CHECKING:
    from .user import User


class SavedItem(PKMixin, ReprMixin, db.Model):
    """
    Snapshot of a catalogue product at the time it was saved.

    ``product_id`` references the external catalogue and is unique per user;
    every other product field (name, images, price...) lives in ``snapshot``
    exactly as the client sent it.
    """

    __tablename__ = "saved_items"

    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    product_id: Mapped[str] = mapped_column(String(64), nullable=False)
    snapshot: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    user: Mapped[User] = relationship(back_populates="saved_items")

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_saved_items_user_id_product_id"),
    )

    @property
    def images(self) -> list[str]:
        return list(self.snapshot.get("images") or [])

    def as_product(self) -> dict[str, Any]:
        """Return the flattened product payload (snapshot plus ``productId``)."""
        return {**self.snapshot, "productId": self.product_id}
