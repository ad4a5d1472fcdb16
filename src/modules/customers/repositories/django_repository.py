"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Database errors are not caught here: they propagate unchanged through
the service to the view, where Django turns them into a 500 response.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        return Customer.objects.filter(id=id).first()

    def find_all(self) -> List[Customer]:
        return list(Customer.objects.order_by("id"))

    def find_by_first_name_and_last_name(
        self, first_name: str, last_name: str
    ) -> List[Customer]:
        """Exact, case-sensitive match on both name columns."""
        queryset = Customer.objects.filter(
            first_name=first_name,
            last_name=last_name,
        ).order_by("id")
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Insert a new customer, or upsert one that already carries an id.

        Django issues an UPDATE for an instance with a primary key and
        falls back to INSERT when no row matched.
        """
        is_new = entity.id is None
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def save_all(self, entities: Iterable[Customer]) -> List[Customer]:
        return [self.save(entity) for entity in entities]

    @transaction.atomic
    def delete(self, entity: Customer) -> None:
        """Delete the row matching ``entity.id``.

        A customer without an id, or whose row is already gone, is ignored.
        """
        if entity.id is None:
            logger.info("customer.delete_skipped", reason="unsaved")
            return
        deleted, _ = Customer.objects.filter(id=entity.id).delete()
        logger.info("customer.deleted", customer_id=entity.id, deleted=deleted)

    @transaction.atomic
    def delete_all(self) -> int:
        deleted, _ = Customer.objects.all().delete()
        logger.info("customer.deleted_all", deleted=deleted)
        return deleted
