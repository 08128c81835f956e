"""Temperature-by-CEP route."""

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response

from cep_weather.config import Settings
from cep_weather.dependencies import get_app_settings, get_http_client, get_renderer
from cep_weather.services import temperature_service
from cep_weather.views.template_renderer import TemplateRenderer

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=ALL_METHODS, response_class=HTMLResponse)
async def temperature_by_cep(
    request: Request,
    cep: str | None = Query(default=None, description="Eight-digit CEP"),
    client: httpx.AsyncClient = Depends(get_http_client),
    renderer: TemplateRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Render the current temperature at the city of a CEP.

    A missing or empty ``cep`` yields 400 with no body. Pipeline failures
    propagate as exceptions and become ``{"message": ...}`` bodies in the
    error handlers.
    """
    if not cep:
        return renderer.render_empty(400)

    result = await temperature_service.get_temperature_by_cep(client, cep, settings)
    return renderer.render_temperature(request, result)
