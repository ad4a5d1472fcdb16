"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity in storage order."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or upsert) an entity and return it with its id."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove an entity; a missing row is a no-op."""
