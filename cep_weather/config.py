from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VIACEP_URL = "https://viacep.com.br/ws/{cep}/json/"
WEATHER_API_URL = "http://api.weatherapi.com/v1/current.json"


class Settings(BaseSettings):
    """Application settings with validation.

    Values come from environment variables or a `.env` file in the working
    directory. Field names map to upper-case variables (PORT, WEATHER_KEY, ...).
    """

    # Server
    host: str = Field(default="0.0.0.0", min_length=1, description="Interface to bind")
    port: int = Field(default=8080, ge=1, le=65535, description="TCP port to bind")

    # Upstreams
    weather_key: str = Field(default="", description="WeatherAPI key; empty disables weather lookups")
    viacep_url: str = Field(default=VIACEP_URL, description="ViaCEP URL template with a {cep} placeholder")
    weather_api_url: str = Field(default=WEATHER_API_URL, pattern=r"^https?://", description="WeatherAPI endpoint")
    http_timeout: float = Field(default=10.0, gt=0, description="Deadline in seconds for each upstream call")

    # Rendering
    template_dir: Path = Field(default=Path("."), description="Directory holding the HTML template")
    template_name: str = Field(default="temperatura.html", min_length=1, description="Success page template")

    # Answer application errors with 422/404/502 instead of 200
    semantic_status_codes: bool = False

    # Logging
    log_level: str = Field(default="INFO", pattern=r"(?i)^(debug|info|warning|error|critical)$")
    log_dir: Path | None = Field(default=Path("logs"), description="Rotating JSON log directory; empty disables")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("weather_key", mode="after")
    @classmethod
    def strip_weather_key(cls, v: str) -> str:
        return v.strip()

    @field_validator("viacep_url", mode="after")
    @classmethod
    def validate_viacep_url(cls, v: str) -> str:
        """Ensure the ViaCEP template is an http(s) URL with a {cep} placeholder."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("viacep_url must be a valid http:// or https:// URL")
        if "{cep}" not in v:
            raise ValueError("viacep_url must contain a {cep} placeholder")
        return v

    @field_validator("log_dir", mode="before")
    @classmethod
    def empty_log_dir_disables_file_logging(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def template_path(self) -> Path:
        return self.template_dir / self.template_name


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    The environment and `.env` file are read once; later calls return the
    same object.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
