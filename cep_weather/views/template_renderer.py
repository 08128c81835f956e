"""Template rendering utilities for the temperature page and error bodies."""

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import Template, TemplateNotFound

from cep_weather.config import Settings
from cep_weather.exceptions import ConfigurationException
from cep_weather.logging_config import get_logger, log_with_context
from cep_weather.models.base_models import ErrorReport
from cep_weather.models.weather import TemperatureResult

logger = get_logger(__name__)


class JSONErrorResponse(JSONResponse):
    """JSON response with an explicit UTF-8 charset."""

    media_type = "application/json; charset=utf-8"


class TemplateRenderer:
    """Renders the temperature page and JSON error reports.

    The template is parsed once when the renderer is built; a missing or
    invalid template is reported at startup rather than on the first request.
    """

    def __init__(self, settings: Settings):
        self.template_name = settings.template_name
        self.templates = Jinja2Templates(directory=settings.template_dir)
        try:
            self.template: Template = self.templates.get_template(self.template_name)
        except TemplateNotFound as e:
            raise ConfigurationException(
                f"Template {self.template_name!r} not found",
                details={"template_dir": str(settings.template_dir)},
            ) from e

        log_with_context(
            logger,
            "info",
            "Template loaded",
            template=str(settings.template_path),
            event_type="template_loaded",
        )

    def render_temperature(self, request: Request, result: TemperatureResult) -> HTMLResponse:
        """Render the success page with TempC, TempF, TempK and Cidade bound.

        Uses the template parsed at startup; later edits to the file are not picked up.
        """
        context = {"request": request, **result.template_context()}
        return HTMLResponse(self.template.render(context))

    @staticmethod
    def render_error(message: str, status_code: int = 200) -> Response:
        """Render ``{"message": ...}`` with the given status."""
        report = ErrorReport(message=message)
        return JSONErrorResponse(status_code=status_code, content=report.model_dump())

    @staticmethod
    def render_empty(status_code: int) -> Response:
        """Status-only response with no body."""
        return Response(status_code=status_code)
