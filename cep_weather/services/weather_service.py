"""Weather service for WeatherAPI integration."""

from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from cep_weather.config import Settings, get_settings
from cep_weather.exceptions import (
    WeatherMalformedException,
    WeatherMisconfiguredException,
    WeatherUnavailableException,
)
from cep_weather.logging_config import get_logger, log_with_context
from cep_weather.models.weather import WeatherAPIErrorResponse, WeatherAPIResponse, WeatherReading

logger = get_logger(__name__)


def build_weather_url(base_url: str, api_key: str, city: str) -> str:
    """Build the ``current.json`` URL with the city percent-encoded.

    Spaces become ``+`` and non-ASCII characters are UTF-8 percent-encoded,
    e.g. ``São Paulo`` -> ``S%C3%A3o+Paulo``.
    """
    return f"{base_url}?{urlencode({'key': api_key, 'q': city})}"


def _upstream_error_message(body: bytes) -> str | None:
    """Extract ``error.message`` from a WeatherAPI failure body, if present."""
    try:
        return WeatherAPIErrorResponse.model_validate_json(body).error.message or None
    except ValidationError:
        return None


async def get_current_weather(client: httpx.AsyncClient, city: str, settings: Settings | None = None) -> WeatherReading:
    """Get current temperature for a city from WeatherAPI.

    Args:
        client: Shared HTTP client for making requests
        city: Free-text city name, as resolved from the CEP
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherReading with Celsius and Fahrenheit as reported upstream

    Raises:
        WeatherMisconfiguredException: No API key configured
        WeatherUnavailableException: Transport failure, timeout or non-200 status
        WeatherMalformedException: 200 response whose body does not decode
    """
    if settings is None:
        settings = get_settings()

    if not settings.weather_key:
        log_with_context(
            logger,
            "error",
            "Weather API key is not configured",
            setting="WEATHER_KEY",
            event_type="weather_misconfigured",
        )
        raise WeatherMisconfiguredException(details={"setting": "WEATHER_KEY"})

    url = build_weather_url(settings.weather_api_url, settings.weather_key, city)

    try:
        async with client.stream("GET", url, timeout=settings.http_timeout) as response:
            body = await response.aread()
            status_code = response.status_code
    except httpx.HTTPError as e:
        log_with_context(
            logger,
            "warning",
            "WeatherAPI request failed",
            city=city,
            error=str(e),
            error_type=type(e).__name__,
            event_type="weather_network_error",
        )
        raise WeatherUnavailableException(
            details={"city": city, "error_type": "network_error", "error": str(e)},
        ) from e

    if status_code != httpx.codes.OK:
        upstream_message = _upstream_error_message(body)
        log_with_context(
            logger,
            "warning",
            "WeatherAPI returned unexpected status",
            city=city,
            status_code=status_code,
            upstream_message=upstream_message,
            event_type="weather_http_error",
        )
        raise WeatherUnavailableException(
            status_code,
            details={"city": city, "upstream_message": upstream_message},
        )

    try:
        data = WeatherAPIResponse.model_validate_json(body)
    except ValidationError as e:
        raise WeatherMalformedException(details={"city": city, "error_type": "parsing_error", "error": str(e)}) from e

    return WeatherReading.from_weatherapi(data)
