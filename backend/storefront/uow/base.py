"""
Abstract Unit of Work contracts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.repositories import UserRepository


class UnitOfWork(ABC):
    """
    Coordinates a transactional boundary for one storefront operation.

    Each public service operation performs one load, in-memory mutations of
    the user aggregate and one save inside a single unit of work.
    """

    users: UserRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...
    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...
    @abstractmethod
    def commit(self) -> None: ...
    @abstractmethod
    def rollback(self) -> None: ...
