"""Customer model.

A customer is an auto-incrementing integer id plus a first and last name.
Names are free text: nullable, not unique and not validated.
"""

from __future__ import annotations

from django.db import models


class Customer(models.Model):
    """Customer entity.

    ``id`` stays ``None`` until the row is inserted; the database assigns it
    and it is never reassigned afterwards.
    """

    id = models.BigAutoField(primary_key=True)
    first_name = models.CharField(max_length=255, null=True, blank=True)
    last_name = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        db_table = "customers"
        ordering = ["id"]
        indexes = [
            models.Index(
                fields=["first_name", "last_name"],
                name="customers_name_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} (#{self.id})"
