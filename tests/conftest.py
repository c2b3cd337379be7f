"""
Configuración de tests y fixtures compartidos.
"""

import copy
from typing import Any, AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
import structlog
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from wompi_client import cli
from wompi_client.adapters.http_client import create_client
from wompi_client.config import get_settings
from wompi_client.logging_config import configure_logging
from wompi_client.routes.events import create_events_router
from wompi_client.schemas.client import CheckoutConfig, ClientConfig


EVENT_KEY = "your-event-key"
MOCK_BASE_URL = "https://api.example.com"


def _event_payload(checksum: str) -> dict[str, Any]:
    return {
        "event": "transaction.updated",
        "data": {
            "transaction": {
                "id": "1234-1610641025-49201",
                "amount_in_cents": 4490000,
                "reference": "MZQ3X2DE2SMX",
                "customer_email": "juan.perez@gmail.com",
                "currency": "COP",
                "payment_method_type": "NEQUI",
                "redirect_url": "https://mitienda.com.co/pagos/redireccion",
                "status": "APPROVED",
                "shipping_address": None,
                "payment_link_id": None,
                "payment_source_id": None,
            }
        },
        "environment": "prod",
        "signature": {
            "properties": [
                "transaction.id",
                "transaction.status",
                "transaction.amount_in_cents",
            ],
            "checksum": checksum,
        },
        "timestamp": 1530291411,
        "sent_at": "2018-07-20T16:45:05.000Z",
    }


@pytest.fixture
def event_key() -> str:
    return EVENT_KEY


@pytest.fixture
def event() -> dict[str, Any]:
    """Evento firmado con EVENT_KEY."""
    return _event_payload("c8b615c36d6002a81d1b911b22a800fef3d989a04e5d8ae6d4038575dbd9e489")


@pytest.fixture
def invalid_event() -> dict[str, Any]:
    """Evento con un checksum que no corresponde a sus datos."""
    return _event_payload("7b9fe6147e8a88f6e80682e4d392069f663f3f9df52c45614f3c94fafb5a18d2")


@pytest.fixture
def tampered_event(event) -> Callable[..., dict[str, Any]]:
    """Retorna una copia del evento válido con campos de la transacción modificados."""

    def _tamper(**changes: Any) -> dict[str, Any]:
        payload = copy.deepcopy(event)
        timestamp = changes.pop("timestamp", None)
        if timestamp is not None:
            payload["timestamp"] = timestamp
        payload["data"]["transaction"].update(changes)
        return payload

    return _tamper


@pytest.fixture
def checkout_config() -> CheckoutConfig:
    return CheckoutConfig(base_url="https://api.example.com/example", public_key="myPublicKey")


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(base_url=MOCK_BASE_URL, private_key="myPrivateKey")


@pytest.fixture
def make_client(client_config) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Crea un cliente de Wompi cuyas peticiones responde `handler`."""

    def _make(handler, config: ClientConfig | None = None) -> httpx.AsyncClient:
        return create_client(config or client_config, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def received_events() -> list:
    return []


@pytest.fixture
def events_app(received_events) -> FastAPI:
    """App de FastAPI con el router de eventos montado."""

    async def on_event(event):
        if event.data.transaction.reference == "FAIL":
            raise RuntimeError("handler failed")
        received_events.append(event)

    app = FastAPI()
    app.include_router(
        create_events_router(EVENT_KEY, on_event=on_event),
        prefix="/api/webhooks/wompi",
    )
    return app


@pytest_asyncio.fixture(scope="function")
async def api_client(events_app) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP para tests del router de eventos."""
    transport = ASGITransport(app=events_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def clean_settings(monkeypatch):
    """Limpia el cache de settings y las variables WOMPI_* del entorno."""
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "WOMPI_API_URL",
        "WOMPI_CHECKOUT_URL",
        "WOMPI_PUBLIC_KEY",
        "WOMPI_PRIVATE_KEY",
        "WOMPI_INTEGRITY_SECRET",
        "WOMPI_EVENT_KEY",
        "WOMPI_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def uncached_loggers(monkeypatch):
    """
    Evita que los loggers queden cacheados entre tests para que
    `structlog.testing.capture_logs` vea todos los eventos.
    """

    def _configure_logging(*args, **kwargs):
        configure_logging(*args, **kwargs)
        structlog.configure(cache_logger_on_first_use=False)

    monkeypatch.setattr(cli, "configure_logging", _configure_logging)
    yield
    structlog.reset_defaults()
