"""Custom exceptions for CEP Weather with their user-facing messages.

Each exception carries the Portuguese message returned to the client and the
semantically correct HTTP status. Whether that status is actually sent is
decided by the error handlers (see ``Settings.semantic_status_codes``).
"""

from enum import Enum
from typing import Any

INVALID_CEP_MESSAGE = "CEP inválido"
CEP_NOT_FOUND_MESSAGE = "CEP não encontrado"
LOCALITY_ERROR_MESSAGE = "Erro ao buscar localização"
WEATHER_ERROR_MESSAGE = "Erro ao buscar clima atual"
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"

LOCALITY_UPSTREAM = "locality"
WEATHER_UPSTREAM = "weather"


class ErrorCode(str, Enum):
    """Error codes used in logs and exception details."""

    CEP_WEATHER_ERROR = "CEP_WEATHER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Input
    INVALID_CEP = "INVALID_CEP"

    # Locality directory
    LOCALITY_ERROR = "LOCALITY_ERROR"
    LOCALITY_UNAVAILABLE = "LOCALITY_UNAVAILABLE"
    LOCALITY_MALFORMED = "LOCALITY_MALFORMED"
    CEP_NOT_FOUND = "CEP_NOT_FOUND"

    # Weather provider
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_UNAVAILABLE = "WEATHER_UNAVAILABLE"
    WEATHER_MALFORMED = "WEATHER_MALFORMED"
    WEATHER_MISCONFIGURED = "WEATHER_MISCONFIGURED"

    # Configuration
    CONFIG_ERROR = "CONFIG_ERROR"


class CEPWeatherException(Exception):
    """Base exception for pipeline errors.

    All custom exceptions inherit from this class so a single handler can
    turn them into ``{"message": ...}`` responses.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CEP_WEATHER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            message: User-facing error message
            code: Error code from ErrorCode enum
            status_code: Semantic HTTP status code (default 500)
            details: Additional error context for logs
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class InvalidCEPException(CEPWeatherException):
    """CEP is not exactly eight ASCII digits."""

    def __init__(self, cep: str):
        super().__init__(
            INVALID_CEP_MESSAGE,
            code=ErrorCode.INVALID_CEP,
            status_code=422,
            details={"cep": cep},
        )


class LocalityException(CEPWeatherException):
    """Locality directory errors."""

    upstream = LOCALITY_UPSTREAM

    def __init__(
        self,
        message: str = LOCALITY_ERROR_MESSAGE,
        code: ErrorCode = ErrorCode.LOCALITY_ERROR,
        status_code: int = 502,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class LocalityUnavailableException(LocalityException):
    """Directory unreachable, timed out, or answered with a non-200 status."""

    def __init__(self, upstream_status: int | None = None, details: dict[str, Any] | None = None):
        self.upstream_status = upstream_status
        details = dict(details or {})
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(code=ErrorCode.LOCALITY_UNAVAILABLE, details=details)


class LocalityMalformedException(LocalityException):
    """Directory answered 200 with a body that could not be decoded."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(code=ErrorCode.LOCALITY_MALFORMED, details=details)


class CEPNotFoundException(LocalityException):
    """Directory reports the CEP does not exist."""

    def __init__(self, cep: str):
        super().__init__(
            CEP_NOT_FOUND_MESSAGE,
            code=ErrorCode.CEP_NOT_FOUND,
            status_code=404,
            details={"cep": cep},
        )


class WeatherException(CEPWeatherException):
    """Weather provider errors."""

    upstream = WEATHER_UPSTREAM

    def __init__(
        self,
        message: str = WEATHER_ERROR_MESSAGE,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 502,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class WeatherUnavailableException(WeatherException):
    """Provider unreachable, timed out, or answered with a non-200 status."""

    def __init__(self, upstream_status: int | None = None, details: dict[str, Any] | None = None):
        self.upstream_status = upstream_status
        details = dict(details or {})
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(code=ErrorCode.WEATHER_UNAVAILABLE, details=details)


class WeatherMalformedException(WeatherException):
    """Provider answered 200 with a body that could not be decoded."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(code=ErrorCode.WEATHER_MALFORMED, details=details)


class WeatherMisconfiguredException(WeatherException):
    """No weather API key configured."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(code=ErrorCode.WEATHER_MISCONFIGURED, status_code=500, details=details)


class ConfigurationException(CEPWeatherException):
    """Configuration errors detected at startup."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.CONFIG_ERROR, status_code=500, details=details)
