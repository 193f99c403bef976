"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from storefront.repositories.base import BaseRepository
from storefront.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
]
