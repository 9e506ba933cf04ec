"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.http_server import app


@pytest.fixture
def client():
    """Create test client with the application lifespan running."""
    with TestClient(app) as client:
        yield client


class TestRootEndpoints:
    """Test service-level endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "CronLens"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["evaluator"]["running"] is True


class TestParseEndpoint:
    """Test cron parse endpoint."""

    def test_parse(self, client):
        """Test parsing an expression with an explicit base time."""
        response = client.post("/api/v1/cron/parse", json={
            "expression": "0 3 * * *",
            "count": 2,
            "base_time": "2024-01-01T01:00:00"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["expression"] == "0 0 3 * * *"
        assert data["fields"]["seconds"] == "0"
        assert data["description"] == "At 03:00."
        assert data["next_runs"] == ["2024-01-01T03:00:00", "2024-01-02T03:00:00"]

    def test_parse_default_count(self, client):
        response = client.post("/api/v1/cron/parse", json={"expression": "*/5 * * * *"})
        assert response.status_code == 200
        assert len(response.json()["next_runs"]) == 5

    def test_parse_impossible_expression(self, client):
        """Test an expression that never fires is not an error."""
        response = client.post("/api/v1/cron/parse", json={
            "expression": "0 0 30 2 *",
            "base_time": "2024-01-01T00:00:00"
        })
        assert response.status_code == 200
        assert response.json()["next_runs"] == []

    def test_parse_invalid(self, client):
        """Test invalid expressions return the error message."""
        response = client.post("/api/v1/cron/parse", json={"expression": "abc"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid expression: expected 5 or 6 fields, got 1"

    def test_parse_zero_step(self, client):
        response = client.post("/api/v1/cron/parse", json={"expression": "*/0 * * * *"})
        assert response.status_code == 400
        assert "positive integer" in response.json()["detail"]

    def test_parse_count_validation(self, client):
        response = client.post("/api/v1/cron/parse", json={"expression": "* * * * *", "count": 0})
        assert response.status_code == 422


class TestDescribeAndValidate:
    """Test describe, validate and examples endpoints."""

    def test_describe(self, client):
        response = client.get("/api/v1/cron/describe", params={"expression": "0 0 1 * 1"})
        assert response.status_code == 200
        assert response.json()["description"] == "At 00:00, on day 1 of the month or on Monday."

    def test_describe_invalid(self, client):
        response = client.get("/api/v1/cron/describe", params={"expression": "70 * * * *"})
        assert response.status_code == 400

    def test_validate(self, client):
        response = client.get("/api/v1/cron/validate", params={"expression": "0 17 * * 1-5"})
        assert response.json() == {"expression": "0 17 * * 1-5", "valid": True, "error": None}

        response = client.get("/api/v1/cron/validate", params={"expression": "0 0 5-2 * *"})
        data = response.json()
        assert data["valid"] is False
        assert "greater than" in data["error"]

    def test_examples(self, client):
        response = client.get("/api/v1/cron/examples")
        assert response.status_code == 200
        examples = response.json()["examples"]
        assert {"name": "Every day at 03:00", "expression": "0 3 * * *"} in examples
        for example in examples:
            check = client.get("/api/v1/cron/validate", params={"expression": example["expression"]})
            assert check.json()["valid"] is True
