"""Customer repository interface.

Extends ``IRepository[Customer]`` with the name look-up and the bulk
operations used to seed and reset the store.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer entity."""

    @abstractmethod
    def find_by_first_name_and_last_name(
        self, first_name: str, last_name: str
    ) -> List[Customer]:
        """Customers whose names equal both arguments exactly."""

    @abstractmethod
    def save_all(self, entities: Iterable[Customer]) -> List[Customer]:
        """Persist several customers in one transaction."""

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every customer and return how many rows were deleted."""
