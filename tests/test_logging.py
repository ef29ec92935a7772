import logging
import uuid

import pytest


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_correlation_id_logged_for_api_requests(self, api_client_with_correlation, caplog):
        api_client, cid = api_client_with_correlation
        with caplog.at_level(logging.INFO):
            api_client.get("/api/v1/orders/0190a0e0-0000-7000-8000-000000000000/")
        assert any(cid in record.getMessage() for record in caplog.records)


class TestSensitiveDataMasking:
    def test_email_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "client.created", "email": "ana.souza@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "ana.souza@example.com" not in result["email"]
        assert "***MASKED***" in result["email"]

    def test_email_inside_text_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "detail": "duplicate for bob@corp.io found"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "bob@corp.io" not in result["detail"]

    def test_password_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    @pytest.mark.parametrize("value", ["ORD-20300115-A1B2C3", "IN_TRANSIT", "+5511988880001"])
    def test_non_sensitive_data_unchanged(self, value):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "order.created", "value": value}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["value"] == value
        assert result["event"] == "order.created"
