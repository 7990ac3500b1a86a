"""Fixtures for API unit tests: settings, mock-sink logger, app with sample routes, AsyncClient."""

import json
import logging
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from adivalt.api.app import create_app
from adivalt.config.settings import AppSettings
from adivalt.domain.exceptions import NotFoundError
from adivalt.observability.logger import Logger
from adivalt.responses.builder import ResponseBuilder


class OrderCreate(BaseModel):
    sku: str
    quantity: int


@pytest.fixture
def settings():
    return AppSettings(
        environment="test",
        service_name="orders",
        version="2.0.0",
        log_level="info",
        skip_paths=["/health"],
    )


@pytest.fixture
def sink():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def logger(settings, sink):
    return Logger(settings.logger_config(), sink=sink)


@pytest.fixture
def emitted(sink):
    """Decoded JSON log payloads in emission order."""

    def read():
        return [json.loads(call.args[1]) for call in sink.log.call_args_list]

    return read


def add_sample_routes(app: FastAPI) -> None:
    @app.get("/orders/{order_id}")
    async def get_order(order_id: str):
        if order_id == "missing":
            raise NotFoundError("Order not found", context={"order_id": order_id})
        return {"id": order_id}

    @app.post("/orders", status_code=201)
    async def create_order(order: OrderCreate):
        return {"sku": order.sku, "quantity": order.quantity}

    @app.delete("/orders/{order_id}")
    async def delete_order(order_id: str):
        return ResponseBuilder.deleted().to_dict()

    @app.get("/explode")
    async def explode():
        raise RuntimeError("database password is hunter2")


@pytest.fixture
def make_app(logger):
    def build(settings: AppSettings) -> FastAPI:
        app = create_app(settings, logger)
        add_sample_routes(app)
        return app

    return build


@pytest.fixture
def app(make_app, settings):
    return make_app(settings)


@pytest.fixture
async def client(app):
    """Async HTTP client; unhandled errors become 500 responses instead of propagating."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
