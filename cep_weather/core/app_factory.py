"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from cep_weather import __version__
from cep_weather.config import Settings, get_settings
from cep_weather.core.lifespan import lifespan
from cep_weather.core.middleware import setup_middleware
from cep_weather.middleware.error_handlers import register_error_handlers
from cep_weather.routers import temperature_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings instance (defaults to singleton)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    # Only "/" is served; docs and the OpenAPI schema would be extra paths
    app = FastAPI(
        title="CEP Weather",
        description="Current temperature for a Brazilian CEP",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    setup_middleware(app)
    register_error_handlers(app)

    app.include_router(temperature_router.router, tags=["temperature"])

    return app
