"""WeatherAPI client error taxonomy."""


class WeatherApiError(Exception):
    """Base class for failures talking to WeatherAPI."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(WeatherApiError):
    """Transport failure or non-success HTTP status."""


class DecodeError(WeatherApiError):
    """Payload could not be parsed into a ForecastResult."""
