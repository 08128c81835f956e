"""Exception handlers mapping pipeline errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from cep_weather.exceptions import INTERNAL_ERROR_MESSAGE, CEPWeatherException, ErrorCode
from cep_weather.logging_config import get_logger, log_with_context
from cep_weather.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


def _uses_semantic_status_codes(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.semantic_status_codes)


async def cep_weather_exception_handler(request: Request, exc: CEPWeatherException) -> Response:
    """Turn a pipeline exception into ``{"message": ...}``.

    The body always carries the exception's user-facing message. The status
    is 200 unless semantic status codes are enabled.
    """
    status_code = exc.status_code if _uses_semantic_status_codes(request) else 200

    log_with_context(
        logger,
        "warning",
        "Temperature lookup failed",
        error_code=exc.code.value,
        upstream=getattr(exc, "upstream", None),
        error_message=exc.message,
        details=exc.details,
        status_code=status_code,
        method=request.method,
        path=request.url.path,
        event_type="cep_weather_error",
    )

    return TemplateRenderer.render_error(exc.message, status_code=status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer routing errors (unknown path, etc.) with an empty body."""
    log_with_context(
        logger,
        "info",
        "HTTP error",
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type="http_error",
    )
    return TemplateRenderer.render_empty(exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected exceptions without exposing internals."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error_code=ErrorCode.INTERNAL_ERROR.value,
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    return TemplateRenderer.render_error(INTERNAL_ERROR_MESSAGE, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    app.add_exception_handler(CEPWeatherException, cep_weather_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
