"""Locality service for ViaCEP API integration."""

import httpx
from pydantic import ValidationError

from cep_weather.config import Settings, get_settings
from cep_weather.exceptions import CEPNotFoundException, LocalityMalformedException, LocalityUnavailableException
from cep_weather.logging_config import get_logger, log_with_context
from cep_weather.models.locality import Locality, ViaCEPResponse

logger = get_logger(__name__)


async def resolve_locality(client: httpx.AsyncClient, cep: str, settings: Settings | None = None) -> Locality:
    """Resolve a validated CEP to its city and state via ViaCEP.

    The response is read inside ``client.stream`` so the connection is
    released on every exit path.

    Args:
        client: Shared HTTP client for making requests
        cep: Eight-digit CEP, already validated
        settings: Settings instance (defaults to singleton)

    Returns:
        Locality with the city name and state code

    Raises:
        LocalityUnavailableException: Transport failure, timeout or non-200 status
        LocalityMalformedException: 200 response whose body does not decode
        CEPNotFoundException: ViaCEP flagged the CEP as unknown
    """
    if settings is None:
        settings = get_settings()

    url = settings.viacep_url.format(cep=cep)

    try:
        async with client.stream("GET", url, timeout=settings.http_timeout) as response:
            if response.status_code != httpx.codes.OK:
                log_with_context(
                    logger,
                    "warning",
                    "ViaCEP returned unexpected status",
                    cep=cep,
                    status_code=response.status_code,
                    event_type="locality_http_error",
                )
                raise LocalityUnavailableException(response.status_code, details={"cep": cep})
            body = await response.aread()
    except httpx.HTTPError as e:
        log_with_context(
            logger,
            "warning",
            "ViaCEP request failed",
            cep=cep,
            error=str(e),
            error_type=type(e).__name__,
            event_type="locality_network_error",
        )
        raise LocalityUnavailableException(
            details={"cep": cep, "error_type": "network_error", "error": str(e)},
        ) from e

    try:
        data = ViaCEPResponse.model_validate_json(body)
    except ValidationError as e:
        raise LocalityMalformedException(details={"cep": cep, "error_type": "parsing_error", "error": str(e)}) from e

    if data.erro:
        log_with_context(logger, "info", "CEP not found", cep=cep, event_type="locality_not_found")
        raise CEPNotFoundException(cep)

    try:
        locality = Locality(city=data.localidade or "", state=data.uf or None)
    except ValidationError as e:
        raise LocalityMalformedException(details={"cep": cep, "error_type": "missing_city", "error": str(e)}) from e

    log_with_context(
        logger,
        "debug",
        "Resolved CEP",
        cep=cep,
        city=locality.city,
        state=locality.state,
        event_type="locality_resolved",
    )
    return locality
