# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================
# End-to-end tests through FastAPI's TestClient: envelopes, status codes,
# routing, and error handling.
# =============================================================================

import logging

import pytest
from fastapi.testclient import TestClient

from src.services import ai_service
from tests.conftest import TEST_EMAIL


# =============================================================================
# /health
# =============================================================================

class TestHealth:
    """Test the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"is_success": True, "official_email": TEST_EMAIL}

    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_email_override(self, client, monkeypatch):
        monkeypatch.setenv("OFFICIAL_EMAIL", "someone.else@chitkara.edu.in")
        from src.core.config import get_settings
        get_settings.cache_clear()

        assert client.get("/health").json()["official_email"] == "someone.else@chitkara.edu.in"


# =============================================================================
# /bfhl success
# =============================================================================

class TestBfhlSuccess:
    """Test successful operations."""

    def test_fibonacci(self, client):
        response = client.post("/bfhl", json={"fibonacci": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["is_success"] is True
        assert body["official_email"] == TEST_EMAIL
        assert body["data"] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_fibonacci_zero(self, client):
        assert client.post("/bfhl", json={"fibonacci": 0}).json()["data"] == []

    def test_prime(self, client):
        response = client.post("/bfhl", json={"prime": [1, 2, 3, 4, 5, 6, 7]})
        assert response.json()["data"] == [2, 3, 5, 7]

    def test_lcm(self, client):
        assert client.post("/bfhl", json={"lcm": [4, 6]}).json()["data"] == 12

    def test_hcf(self, client):
        assert client.post("/bfhl", json={"hcf": [12, 18, 24]}).json()["data"] == 6

    def test_ai_lookup_without_key(self, client):
        response = client.post("/bfhl", json={"AI": "capital of india"})

        assert response.status_code == 200
        assert response.json()["data"] == "Delhi"

    def test_ai_numeric_answer_stays_string(self, client):
        assert client.post("/bfhl", json={"AI": "What is 2+2?"}).json()["data"] == "4"

    def test_ai_unknown_without_key(self, client):
        assert client.post("/bfhl", json={"AI": "capital of peru"}).json()["data"] == "Unknown"

    def test_response_time_header(self, client):
        response = client.post("/bfhl", json={"hcf": [4, 6]})
        assert "X-Response-Time" in response.headers


# =============================================================================
# /bfhl validation failures
# =============================================================================

class TestBfhlValidation:
    """Test 400 responses."""

    @pytest.mark.parametrize(
        "body",
        [{}, {"a": 1, "b": 2}, {"foo": 1}, {"fibonacci": 1001}, {"lcm": [0, 5]}, {"prime": []}],
    )
    def test_rejected_bodies(self, client, body):
        response = client.post("/bfhl", json=body)

        assert response.status_code == 400
        payload = response.json()
        assert payload["is_success"] is False
        assert payload["official_email"] == TEST_EMAIL
        assert payload["error"]
        assert "data" not in payload

    def test_error_message(self, client):
        response = client.post("/bfhl", json={"lcm": [0, 5]})
        assert response.json()["error"] == "lcm array must contain only non-zero integers"

    def test_malformed_json(self, client):
        response = client.post(
            "/bfhl",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Request body must be valid JSON"

    def test_missing_body(self, client):
        response = client.post("/bfhl")

        assert response.status_code == 400
        assert response.json()["error"] == "Request body cannot be empty"

    def test_array_body(self, client):
        assert client.post("/bfhl", json=[1, 2]).status_code == 400

    def test_deeply_nested_json(self, client):
        """Nesting past the decoder recursion limit is a client error."""
        depth = 100000
        raw = b'{"prime": ' + b"[" * depth + b"]" * depth + b"}"

        response = client.post(
            "/bfhl",
            content=raw,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Request body must be valid JSON"


# =============================================================================
# Routing and unexpected errors
# =============================================================================

class TestRoutingAndErrors:
    """Test 404 and 500 envelopes."""

    def test_unknown_route(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"is_success": False, "error": "Endpoint not found"}

    def test_wrong_method_is_not_found(self, client):
        response = client.get("/bfhl")

        assert response.status_code == 404
        assert response.json()["error"] == "Endpoint not found"

    def test_unexpected_error_is_500(self, monkeypatch):
        from src.api.main import app

        class BrokenService:
            async def answer(self, question):
                raise RuntimeError("boom")

        monkeypatch.setattr("src.api.routes.bfhl.get_ai_service", lambda: BrokenService())

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post("/bfhl", json={"AI": "capital of peru"})

        assert response.status_code == 500
        assert response.json() == {
            "is_success": False,
            "official_email": TEST_EMAIL,
            "error": "Internal server error",
        }

    def test_gemini_failure_is_absorbed(self, client, monkeypatch, ai_settings):
        class FailingClient:
            async def answer(self, question):
                from src.core.exceptions import LLMError
                raise LLMError("timed out")

        service = ai_service.AIService(ai_settings, client=FailingClient())
        monkeypatch.setattr("src.api.routes.bfhl.get_ai_service", lambda: service)

        response = client.post("/bfhl", json={"AI": "capital of peru"})

        assert response.status_code == 200
        assert response.json()["data"] == "Unknown"


# =============================================================================
# Audit logging
# =============================================================================

class TestAuditLog:
    """Test the per-request audit line."""

    def test_logs_operation_key(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="src.core.audit"):
            client.post("/bfhl", json={"lcm": [4, 6]})

        lines = [r.getMessage() for r in caplog.records if r.name == "src.core.audit"]
        assert any("POST /bfhl op=lcm status=200" in line for line in lines)

    def test_rejected_request_has_no_operation(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="src.core.audit"):
            client.post("/bfhl", json={"foo": 1})

        records = [r for r in caplog.records if r.name == "src.core.audit"]
        assert any("op=- status=400" in r.getMessage() for r in records)
        assert all(r.levelno == logging.WARNING for r in records)
