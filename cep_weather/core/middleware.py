"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from cep_weather.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each inbound request with its status and duration.

        Requests that end in an unhandled exception are logged as 500 before
        the exception is re-raised to the error handlers.
        """
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Request failed",
                method=request.method,
                path=request.url.path,
                cep=request.query_params.get("cep"),
                status_code=500,
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                event_type="request_failed",
            )
            raise
        log_with_context(
            logger,
            "info",
            "Request handled",
            method=request.method,
            path=request.url.path,
            cep=request.query_params.get("cep"),
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            event_type="request_handled",
        )
        return response
