"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Request

from cep_weather.config import Settings
from cep_weather.views.template_renderer import TemplateRenderer


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Raises:
        RuntimeError: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise RuntimeError("HTTP client not initialized. This should never happen.")

    return client


async def get_renderer(request: Request) -> TemplateRenderer:
    """
    Get the template renderer built at startup.

    Raises:
        RuntimeError: If the renderer is not initialized.
    """
    renderer: TemplateRenderer | None = getattr(request.app.state, "renderer", None)

    if renderer is None:
        raise RuntimeError("Template renderer not initialized.")

    return renderer


async def get_app_settings(request: Request) -> Settings:
    """Get the Settings instance the app was created with."""
    return request.app.state.settings
