"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.  Request
bodies are parsed into ``CustomerDTO``; a body of the wrong shape is
answered with 400.  Everything else the service raises propagates to
Django unchanged.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.dtos import CustomerDTO
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(ViewSet):
    """Handlers for the ``/customers`` resource.

    The service is injected through ``as_view(..., service=...)`` in
    ``urls.py``.  Does not touch the ORM directly: all persistence goes
    through the service/repository layer.
    """

    service: CustomerService | None = None
    serializer_class = CustomerSerializer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /customers"""
        customers = self.service.find_all()
        return Response(CustomerSerializer(customers, many=True).data)

    def find_by_name(
        self, request: Request, first_name: str, last_name: str
    ) -> Response:
        """GET /customers/{firstName}/{lastName}"""
        customers = self.service.find_by_first_name_and_last_name(
            first_name, last_name
        )
        return Response(CustomerSerializer(customers, many=True).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /customers"""
        try:
            dto = CustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        customer = self.service.create_customer(dto.to_entity())
        return Response(CustomerSerializer(customer).data, status=status.HTTP_200_OK)

    def destroy(self, request: Request) -> Response:
        """DELETE /customers"""
        try:
            dto = CustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        self.service.delete_customer(dto.to_entity())
        return Response(status=status.HTTP_200_OK)
