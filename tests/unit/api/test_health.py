"""Tests for GET /health: 200, service identity, wrapped in the success envelope."""

from httpx import AsyncClient

import adivalt
from adivalt.api.middleware import REQUEST_ID_HEADER


async def test_health_returns_200(client: AsyncClient):
    """GET /health returns service identity inside the envelope."""
    r = await client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"]["status"] == "ok"
    assert body["data"]["service"] == "orders"
    assert body["data"]["environment"] == "test"
    assert body["data"]["version"] == "2.0.0"


async def test_health_request_id_echoed(client: AsyncClient):
    r = await client.get("/health", headers={REQUEST_ID_HEADER: "req-2"})
    assert r.json()["data"]["request_id"] == "req-2"
    assert r.headers[REQUEST_ID_HEADER] == "req-2"


def test_app_state_carries_settings_and_logger(app, settings, logger):
    assert app.state.settings is settings
    assert app.state.logger is logger


def test_public_api_exports_resolve():
    for name in adivalt.__all__:
        assert getattr(adivalt, name) is not None
