"""End-to-end tests for the HTTP endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.constants import PolicyName
from app.main import create_app
from tests.conftest import full_profile


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "env": "test"}


class TestUserValidate:
    def test_valid_profile(self, client: TestClient):
        body = {
            "id": "u1",
            "businessProfile": {"companyName": "Acme", "taxIdentifiers": {"pan": "AB12345678"}},
        }
        response = client.post("/user/validate", json=body)
        assert response.status_code == 200
        assert response.json() == {"message": "User data is valid.", "userId": "u1"}

    def test_full_profile(self, client: TestClient):
        response = client.post("/user/validate", json={"id": "u1", "businessProfile": full_profile()})
        assert response.status_code == 200

    def test_blank_company_name(self, client: TestClient):
        response = client.post("/user/validate", json={"id": "u1", "businessProfile": {"companyName": "  "}})
        assert response.status_code == 400
        assert response.json() == {"errors": ["Company name should not be empty."], "userId": "u1"}

    def test_multiple_errors_in_rule_order(self, client: TestClient):
        profile = {"legalAddress": {"zip": "1234"}, "taxIdentifiers": {"pan": "short"}}
        response = client.post("/user/validate", json={"id": "u1", "businessProfile": profile})
        assert response.status_code == 400
        assert response.json()["errors"] == [
            "PAN should be 10 alphanumeric characters.",
            "Legal address zip code should be a valid 5-digit numeric value.",
        ]

    def test_missing_id(self, client: TestClient):
        response = client.post("/user/validate", json={"businessProfile": {"companyName": " "}})
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is missing in the request."}

    @pytest.mark.parametrize("user_id", [False, 0, ""])
    def test_falsy_id_is_missing(self, client: TestClient, user_id):
        response = client.post(
            "/user/validate",
            json={"id": user_id, "businessProfile": {"companyName": "Acme"}},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is missing in the request."}

    def test_no_body(self, client: TestClient):
        response = client.post("/user/validate")
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is missing in the request."}

    def test_array_body(self, client: TestClient):
        response = client.post("/user/validate", json=[{"id": "u1"}])
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is missing in the request."}

    def test_malformed_json(self, client: TestClient):
        response = client.post(
            "/user/validate",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 422

    def test_vacuous_pass(self, client: TestClient):
        response = client.post("/user/validate", json={"id": "u1"})
        assert response.status_code == 200


class TestProductValidate:
    def test_valid(self, client: TestClient):
        response = client.post(
            "/product/validate",
            json={"userId": "u1", "businessProfile": full_profile()},
            headers={"productId": "p1"},
        )
        assert response.status_code == 200
        assert response.json() == {"message": "User data is valid.", "userId": "u1", "productId": "p1"}

    def test_missing_product_header(self, client: TestClient):
        response = client.post(
            "/product/validate",
            json={"userId": "u1", "businessProfile": {"companyName": "  "}},
        )
        assert response.status_code == 400
        assert response.json() == {
            "error": "Product ID is missing in the request headers.",
            "userId": "u1",
        }

    def test_missing_user_id(self, client: TestClient):
        response = client.post(
            "/product/validate",
            json={"id": "u1", "businessProfile": full_profile()},
            headers={"productId": "p1"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is missing in the request.", "productId": "p1"}

    def test_field_errors_echo_both_ids(self, client: TestClient):
        response = client.post(
            "/product/validate",
            json={"userId": "u1", "businessProfile": {"email": "not-an-email"}},
            headers={"productid": "p1"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "errors": ["Email is invalid."],
            "userId": "u1",
            "productId": "p1",
        }


class TestUnconfiguredPolicy:
    def test_missing_service_is_503(self, settings):
        app = create_app(settings)
        del app.state.validation_services[PolicyName.USER_PRODUCT]
        with TestClient(app) as client:
            response = client.post(
                "/product/validate",
                json={"userId": "u1"},
                headers={"productId": "p1"},
            )
            assert response.status_code == 503
            assert response.json() == {"detail": "Validation policy 'user_product' is not configured"}
            assert client.post("/user/validate", json={"id": "u1"}).status_code == 200
