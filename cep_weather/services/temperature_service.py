"""CEP to temperature pipeline."""

import httpx

from cep_weather.config import Settings, get_settings
from cep_weather.exceptions import InvalidCEPException
from cep_weather.logging_config import get_logger, log_with_context
from cep_weather.models.weather import TemperatureResult
from cep_weather.services import locality_service, weather_service
from cep_weather.services.cep_validator import is_valid_cep

logger = get_logger(__name__)


async def get_temperature_by_cep(
    client: httpx.AsyncClient, cep: str, settings: Settings | None = None
) -> TemperatureResult:
    """Validate the CEP, resolve its city and fetch the current temperature there.

    Stages run strictly in order; the first failure propagates as a
    ``CEPWeatherException`` subclass and later stages never run.

    Raises:
        InvalidCEPException: CEP is not eight ASCII digits
        LocalityException: ViaCEP lookup failed or the CEP does not exist
        WeatherException: WeatherAPI lookup failed or is not configured
    """
    if settings is None:
        settings = get_settings()

    if not is_valid_cep(cep):
        raise InvalidCEPException(cep)

    locality = await locality_service.resolve_locality(client, cep, settings)
    reading = await weather_service.get_current_weather(client, locality.city, settings)
    result = TemperatureResult.from_reading(reading, locality.city)

    log_with_context(
        logger,
        "info",
        "Temperature lookup succeeded",
        cep=cep,
        city=result.city,
        temp_c=result.temp_c,
        event_type="temperature_lookup",
    )
    return result
