"""Pytest configuration and shared fixtures."""

import asyncio
from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from cep_weather.config import Settings
from cep_weather.core.app_factory import create_app
from cep_weather.dependencies import get_http_client

REPO_ROOT = Path(__file__).resolve().parent.parent

VIACEP_HOST = "viacep.com.br"
WEATHERAPI_HOST = "api.weatherapi.com"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeUpstreams:
    """MockTransport handler standing in for ViaCEP and WeatherAPI.

    Each host maps to a callable building a fresh response; every request
    seen is recorded in ``requests``.
    """

    def __init__(self, locality: Handler, weather: Handler):
        self.routes: dict[str, Handler] = {VIACEP_HOST: locality, WEATHERAPI_HOST: weather}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            return httpx.Response(404)
        return handler(request)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


class TrackingStream(httpx.AsyncByteStream):
    """Response body that records whether it was closed."""

    def __init__(self, content: bytes):
        self.content = content
        self.closed = False

    async def __aiter__(self):
        yield self.content

    async def aclose(self) -> None:
        self.closed = True


def respond(status_code: int = 200, json=None, content: bytes | None = None) -> Handler:
    """Handler returning a fixed status and body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if json is not None:
            return httpx.Response(status_code, json=json)
        return httpx.Response(status_code, content=content or b"")

    return handler


def fail_with(exc_type: type[httpx.TransportError], message: str = "upstream down") -> Handler:
    """Handler raising a transport error for the request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)

    return handler


@pytest.fixture
def test_settings():
    """Settings with test values, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        host="127.0.0.1",
        port=8080,
        weather_key="test-weather-key",
        template_dir=REPO_ROOT,
        template_name="temperatura.html",
        semantic_status_codes=False,
        log_level="INFO",
        log_dir=None,
    )


@pytest.fixture
def semantic_settings(test_settings):
    """Test settings answering application errors with semantic status codes."""
    return test_settings.model_copy(update={"semantic_status_codes": True})


@pytest.fixture
def viacep_sao_paulo():
    """ViaCEP response for CEP 01001-000."""
    return {
        "cep": "01001-000",
        "logradouro": "Praça da Sé",
        "complemento": "lado ímpar",
        "bairro": "Sé",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308",
        "ddd": "11",
        "erro": False,
    }


@pytest.fixture
def weatherapi_current():
    """WeatherAPI current.json response."""
    return {
        "location": {"name": "Sao Paulo", "region": "Sao Paulo", "country": "Brazil"},
        "current": {
            "last_updated": "2026-10-19 14:00",
            "temp_c": 25.0,
            "temp_f": 77.0,
            "is_day": 1,
            "condition": {"text": "Sunny", "code": 1000},
        },
    }


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for code that only passes the client through."""
    return AsyncMock(spec=httpx.AsyncClient)


def close_http_clients(clients: list[httpx.AsyncClient]) -> None:
    """Close every client still open, outside any running event loop."""
    for client in clients:
        if not client.is_closed:
            asyncio.run(client.aclose())


@pytest.fixture
def make_http_client():
    """Build real AsyncClients whose requests go to a MockTransport handler.

    Clients still open at teardown are closed.
    """
    clients: list[httpx.AsyncClient] = []

    def factory(handler: Handler) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    close_http_clients(clients)


@pytest.fixture
def upstreams(viacep_sao_paulo, weatherapi_current):
    """Both upstreams answering successfully for São Paulo."""
    return FakeUpstreams(
        locality=respond(200, json=viacep_sao_paulo),
        weather=respond(200, json=weatherapi_current),
    )


def build_test_app(settings: Settings, upstreams: FakeUpstreams, make_http_client):
    app = create_app(settings)
    client = make_http_client(upstreams)
    app.dependency_overrides[get_http_client] = lambda: client
    return app


@pytest.fixture
def test_client(test_settings, upstreams, make_http_client):
    """FastAPI test client with lifespan context and faked upstreams."""
    app = build_test_app(test_settings, upstreams, make_http_client)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def semantic_test_client(semantic_settings, upstreams, make_http_client):
    """Test client with semantic status codes enabled."""
    app = build_test_app(semantic_settings, upstreams, make_http_client)
    with TestClient(app) as client:
        yield client
