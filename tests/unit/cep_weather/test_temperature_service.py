"""Unit tests for the CEP to temperature pipeline."""

from unittest.mock import AsyncMock

import pytest

from cep_weather.exceptions import CEPNotFoundException, InvalidCEPException, WeatherUnavailableException
from cep_weather.models.locality import Locality
from cep_weather.models.weather import TemperatureResult, WeatherReading
from cep_weather.services import locality_service, temperature_service, weather_service


@pytest.fixture
def mock_resolve_locality(monkeypatch):
    mock = AsyncMock(return_value=Locality(city="São Paulo", state="SP"))
    monkeypatch.setattr(locality_service, "resolve_locality", mock)
    return mock


@pytest.fixture
def mock_get_current_weather(monkeypatch):
    mock = AsyncMock(return_value=WeatherReading(temp_c=25.0, temp_f=77.0))
    monkeypatch.setattr(weather_service, "get_current_weather", mock)
    return mock


@pytest.mark.asyncio
async def test_pipeline_success(mock_http_client, test_settings, mock_resolve_locality, mock_get_current_weather):
    result = await temperature_service.get_temperature_by_cep(mock_http_client, "01001000", test_settings)

    assert result == TemperatureResult(temp_c=25.0, temp_f=77.0, temp_k=25.0 + 273.15, city="São Paulo")
    mock_resolve_locality.assert_awaited_once_with(mock_http_client, "01001000", test_settings)
    mock_get_current_weather.assert_awaited_once_with(mock_http_client, "São Paulo", test_settings)


@pytest.mark.asyncio
@pytest.mark.parametrize("cep", ["abc", "01001-000", "0100100"])
async def test_invalid_cep_stops_pipeline(
    mock_http_client, test_settings, mock_resolve_locality, mock_get_current_weather, cep
):
    with pytest.raises(InvalidCEPException):
        await temperature_service.get_temperature_by_cep(mock_http_client, cep, test_settings)

    mock_resolve_locality.assert_not_awaited()
    mock_get_current_weather.assert_not_awaited()


@pytest.mark.asyncio
async def test_locality_failure_skips_weather(
    mock_http_client, test_settings, mock_resolve_locality, mock_get_current_weather
):
    mock_resolve_locality.side_effect = CEPNotFoundException("99999999")

    with pytest.raises(CEPNotFoundException):
        await temperature_service.get_temperature_by_cep(mock_http_client, "99999999", test_settings)

    mock_get_current_weather.assert_not_awaited()


@pytest.mark.asyncio
async def test_weather_failure_propagates(
    mock_http_client, test_settings, mock_resolve_locality, mock_get_current_weather
):
    mock_get_current_weather.side_effect = WeatherUnavailableException(503)

    with pytest.raises(WeatherUnavailableException):
        await temperature_service.get_temperature_by_cep(mock_http_client, "01001000", test_settings)

    mock_resolve_locality.assert_awaited_once()
