"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from cep_weather import __version__
from cep_weather.config import Settings
from cep_weather.logging_config import get_logger, log_with_context
from cep_weather.middleware.logging_middleware import redact_sensitive_data
from cep_weather.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log upstream requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log upstream responses with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared upstream client with connection pooling and a per-call deadline."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        limits=httpx.Limits(
            max_keepalive_connections=10,
            max_connections=100,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Startup parses the template and opens the shared HTTP client; shutdown
    closes the client. Exceptions raised while serving are logged and
    re-raised.
    """
    settings: Settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting CEP Weather application",
        version=__version__,
        semantic_status_codes=settings.semantic_status_codes,
        event_type="app_startup",
    )

    if not settings.weather_key:
        log_with_context(
            logger,
            "warning",
            "WEATHER_KEY is not set; weather lookups will fail",
            event_type="config_weather_key_missing",
        )

    app.state.renderer = TemplateRenderer(settings)

    client = create_http_client(settings)
    app.state.http_client = client
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        timeout=settings.http_timeout,
        event_type="http_client_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down CEP Weather application",
            event_type="app_shutdown",
        )
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
