"""CEP Weather models"""

from cep_weather.models.base_models import ErrorReport
from cep_weather.models.locality import Locality, ViaCEPResponse
from cep_weather.models.weather import (
    CurrentConditions,
    TemperatureResult,
    WeatherAPIErrorResponse,
    WeatherAPIResponse,
    WeatherReading,
)

__all__ = [
    "ErrorReport",
    "Locality",
    "ViaCEPResponse",
    "CurrentConditions",
    "TemperatureResult",
    "WeatherAPIErrorResponse",
    "WeatherAPIResponse",
    "WeatherReading",
]
