"""Unit tests for CustomerViewSet.

The service is a ``MagicMock`` injected through ``as_view``; requests are
built with DRF's ``APIRequestFactory`` so no routing or database is involved.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from rest_framework.test import APIRequestFactory

from modules.customers.models import Customer
from modules.customers.views import CustomerViewSet

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture()
def mock_service():
    return MagicMock()


@pytest.fixture()
def collection_view(mock_service):
    return CustomerViewSet.as_view(
        {"get": "list", "post": "create", "delete": "destroy"},
        service=mock_service,
    )


@pytest.fixture()
def by_name_view(mock_service):
    return CustomerViewSet.as_view({"get": "find_by_name"}, service=mock_service)


# ===========================================================================
# GET /customers
# ===========================================================================


class TestList:
    def test_returns_every_customer(self, factory, collection_view, mock_service):
        mock_service.find_all.return_value = [
            Customer(id=1, first_name="John", last_name="Doe"),
            Customer(id=2, first_name="Jane", last_name="Doe"),
            Customer(id=3, first_name="Peter", last_name="Pan"),
            Customer(id=4, first_name="Paul", last_name="Nobody"),
        ]

        response = collection_view(factory.get("/customers"))

        assert response.status_code == 200
        assert len(response.data) == 4
        assert response.data[0]["firstName"] == "John"
        assert response.data[0]["lastName"] == "Doe"
        assert response.data[3]["firstName"] == "Paul"
        assert response.data[3]["lastName"] == "Nobody"

    def test_empty(self, factory, collection_view, mock_service):
        mock_service.find_all.return_value = []

        response = collection_view(factory.get("/customers"))

        assert response.status_code == 200
        assert response.data == []


# ===========================================================================
# GET /customers/{firstName}/{lastName}
# ===========================================================================


class TestFindByName:
    def test_forwards_path_names(self, factory, by_name_view, mock_service):
        mock_service.find_by_first_name_and_last_name.return_value = [
            Customer(id=1, first_name="John", last_name="Doe"),
        ]

        response = by_name_view(
            factory.get("/customers/John/Doe"), first_name="John", last_name="Doe"
        )

        assert response.status_code == 200
        assert len(response.data) == 1
        assert response.data[0]["firstName"] == "John"
        assert response.data[0]["lastName"] == "Doe"
        mock_service.find_by_first_name_and_last_name.assert_called_once_with(
            "John", "Doe"
        )


# ===========================================================================
# POST /customers
# ===========================================================================


class TestCreate:
    def test_returns_created_customer(self, factory, collection_view, mock_service):
        mock_service.create_customer.return_value = Customer(
            id=1, first_name="John", last_name="Doe"
        )

        request = factory.post(
            "/customers", {"id": None, "firstName": "John", "lastName": "Doe"}, format="json"
        )
        response = collection_view(request)

        assert response.status_code == 200
        assert response.data == {"id": 1, "firstName": "John", "lastName": "Doe"}

        (passed,), _ = mock_service.create_customer.call_args
        assert passed.id is None
        assert passed.first_name == "John"
        assert passed.last_name == "Doe"

    def test_wrong_shape_returns_400(self, factory, collection_view, mock_service):
        request = factory.post("/customers", [1, 2], format="json")
        response = collection_view(request)

        assert response.status_code == 400
        assert "detail" in response.data
        mock_service.create_customer.assert_not_called()

    def test_malformed_json_returns_400(self, factory, collection_view, mock_service):
        request = factory.post("/customers", "{", content_type="application/json")
        response = collection_view(request)

        assert response.status_code == 400
        mock_service.create_customer.assert_not_called()


# ===========================================================================
# DELETE /customers
# ===========================================================================


class TestDestroy:
    def test_forwards_customer(self, factory, collection_view, mock_service):
        request = factory.delete(
            "/customers", {"id": 1, "firstName": "John", "lastName": "Doe"}, format="json"
        )
        response = collection_view(request)
        response.render()

        assert response.status_code == 200
        assert response.content == b""

        mock_service.delete_customer.assert_called_once()
        (passed,), _ = mock_service.delete_customer.call_args
        assert passed.id == 1
        assert passed.first_name == "John"
        assert passed.last_name == "Doe"
