"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_auth_error_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/clients/0190a0e0-0000-7000-8000-000000000000/")
        assert response.status_code == 401
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"][0]["code"] == "not_authenticated"
        assert "detail" in data["errors"][0]

    def test_malformed_json_has_standard_format(self, operator_client):
        response = operator_client.post("/api/v1/orders/", data="{", content_type="application/json")
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "parse_error"

    def test_not_found_has_context(self, viewer_client):
        response = viewer_client.get("/api/v1/carriers/0190a0e0-0000-7000-8000-000000000000/")
        assert response.status_code == 404
        data = response.json()
        assert data["errors"][0]["code"] == "not_found"
        assert data["context"]["entity"] == "carrier"

    def test_missing_fields_name_each_attr(self, operator_client):
        response = operator_client.post("/api/v1/orders/", {}, format="json")
        assert response.status_code == 400
        attrs = {error["attr"] for error in response.json()["errors"]}
        assert {"client_id", "product_id", "carrier_id", "route_id", "quantity"} <= attrs
