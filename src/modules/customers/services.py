"""Customer service layer (Use Cases).

A pass-through façade over the injected ``ICustomerRepository``: each
method forwards to the matching repository call and returns its result,
or lets its exception propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    Holds no other state, so one instance is shared by all requests.
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[Customer]:
        return self._repo.find_all()

    def find_by_first_name_and_last_name(
        self, first_name: str, last_name: str
    ) -> List[Customer]:
        return self._repo.find_by_first_name_and_last_name(first_name, last_name)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_customer(self, customer: Customer) -> Customer:
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer

    def delete_customer(self, customer: Customer) -> None:
        self._repo.delete(customer)
        logger.info("customer.delete_requested", customer_id=customer.id)
