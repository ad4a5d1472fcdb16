"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  The API
layer parses request bodies into these before handing a ``Customer``
to the service.  DTOs are immutable (``frozen=True``).

Every field is optional and no business validation happens here; only
the JSON shape is checked (an object with an integer ``id`` and string
names, any of which may be missing or null).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from modules.customers.models import Customer


class CustomerDTO(BaseModel):
    """Immutable DTO for create and delete request bodies.

    Accepts the camelCase wire names (``firstName``) as well as the
    Python field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")

    def to_entity(self) -> Customer:
        """Build an unsaved ``Customer`` instance carrying these values."""
        return Customer(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
        )
