"""
FastAPI endpoint tests for the num2english API.

Uses httpx + FastAPI TestClient, no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from num2english.config import Settings

client = TestClient(app)


@pytest.fixture(autouse=True)
def _settings() -> None:
    """Install default settings for every API test (bypasses lifespan)."""
    api._settings = Settings()
    yield  # type: ignore[misc]
    api._settings = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["max_magnitude"] == "decicentillion"

    def test_health_before_startup_returns_503(self) -> None:
        api._settings = None
        assert client.get("/health").status_code == 503


class TestConvertEndpoint:
    def test_converts_decimal(self) -> None:
        resp = client.post("/convert", json={"value": "60.212"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "sixty and two hundred twelve thousandths"
        assert data["value"] == "60.212"

    def test_returns_split_parts(self) -> None:
        data = client.post("/convert", json={"value": "0.056"}).json()
        assert data["integer"] is None
        assert data["fraction"] == 56
        assert data["decimal_places"] == 3

    def test_negative_value(self) -> None:
        data = client.post("/convert", json={"value": "-123456"}).json()
        assert data["words"] == (
            "negative one hundred twenty-three thousand four hundred fifty-six"
        )
        assert data["integer"] == -123456

    def test_negative_zero(self) -> None:
        data = client.post("/convert", json={"value": "-0.0"}).json()
        assert data["words"] == "zero"

    def test_path_variant(self) -> None:
        resp = client.get("/convert/52.000001")
        assert resp.status_code == 200
        assert resp.json()["words"] == "fifty-two and one millionth"


class TestConvertErrors:
    def test_scientific_notation_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "1.5e10"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNSUPPORTED_NOTATION"

    def test_malformed_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "twelve"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "MALFORMED_NUMBER"

    def test_overflow_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": "1" + "0" * 400})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "MAGNITUDE_OVERFLOW"
        assert detail["details"]["max_exponent"] == 336

    def test_digit_limit_overflow_returns_422(self) -> None:
        api._settings = Settings(max_input_length=10_000)
        resp = client.post("/convert", json={"value": "1" * 5000})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "MAGNITUDE_OVERFLOW"

    def test_too_long_returns_413(self) -> None:
        api._settings = Settings(max_input_length=10)
        resp = client.post("/convert", json={"value": "1" * 11})
        assert resp.status_code == 413

    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_empty_value_returns_422(self) -> None:
        resp = client.post("/convert", json={"value": ""})
        assert resp.status_code == 422
