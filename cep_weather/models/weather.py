"""Pydantic models for WeatherAPI data and the temperature result."""

from pydantic import BaseModel, FiniteFloat

from cep_weather.services.temperature_converter import celsius_to_kelvin


class CurrentConditions(BaseModel):
    """``current`` section of the WeatherAPI response."""

    temp_c: FiniteFloat
    temp_f: FiniteFloat


class WeatherAPIErrorInfo(BaseModel):
    """``error`` section WeatherAPI sends on failures."""

    code: int | None = None
    message: str = ""


class WeatherAPIResponse(BaseModel):
    """Raw WeatherAPI ``current.json`` response model."""

    current: CurrentConditions


class WeatherAPIErrorResponse(BaseModel):
    """Body of a non-200 WeatherAPI response."""

    error: WeatherAPIErrorInfo


class WeatherReading(BaseModel):
    """Current temperature as reported upstream."""

    temp_c: FiniteFloat
    temp_f: FiniteFloat

    @classmethod
    def from_weatherapi(cls, data: WeatherAPIResponse) -> "WeatherReading":
        return cls(temp_c=data.current.temp_c, temp_f=data.current.temp_f)


class TemperatureResult(BaseModel):
    """Temperature at a city in Celsius, Fahrenheit and Kelvin."""

    temp_c: float
    temp_f: float
    temp_k: float
    city: str

    @classmethod
    def from_reading(cls, reading: WeatherReading, city: str) -> "TemperatureResult":
        """Build the result, deriving Kelvin from Celsius.

        Fahrenheit is kept as reported so upstream rounding is preserved.
        """
        return cls(
            temp_c=reading.temp_c,
            temp_f=reading.temp_f,
            temp_k=celsius_to_kelvin(reading.temp_c),
            city=city,
        )

    def template_context(self) -> dict[str, float | str]:
        """Names bound in the ``temperatura.html`` template."""
        return {
            "TempC": self.temp_c,
            "TempF": self.temp_f,
            "TempK": self.temp_k,
            "Cidade": self.city,
        }
