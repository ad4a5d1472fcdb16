"""Customer URL configuration.

Builds the service once, when the URLconf is first loaded, and hands the
same instance to every route.
"""

from __future__ import annotations

from django.urls import path

from modules.customers.repositories import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.customers.views import CustomerViewSet

customer_service = CustomerService(repository=CustomerDjangoRepository())

customer_collection = CustomerViewSet.as_view(
    {"get": "list", "post": "create", "delete": "destroy"},
    service=customer_service,
)
customer_by_name = CustomerViewSet.as_view(
    {"get": "find_by_name"},
    service=customer_service,
)

urlpatterns = [
    path("customers", customer_collection, name="customer-list"),
    path(
        "customers/<str:first_name>/<str:last_name>",
        customer_by_name,
        name="customer-by-name",
    ),
]
