import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/customers", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/customers")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_repository_logs(self, api_client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/customers",
                {"firstName": "John", "lastName": "Doe"},
                format="json",
                HTTP_X_REQUEST_ID=custom_id,
            )
        saved = [r for r in caplog.records if "customer.saved" in r.getMessage()]
        assert saved, [r.getMessage() for r in caplog.records]
        assert custom_id in saved[0].getMessage()
