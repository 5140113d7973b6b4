"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherapp.config.defaults import (
    DEFAULT_DAYS,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_LOCATION,
    DEFAULT_TIMEOUT_SECONDS,
    WEATHERAPI_BASE_URL,
)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = WEATHERAPI_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_location: str = Field(default=DEFAULT_LOCATION, min_length=1)
    default_days: int = Field(default=DEFAULT_DAYS, ge=1, le=14)
    error_fallback: str = Field(default=DEFAULT_ERROR_MESSAGE, min_length=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    forecast: ForecastConfig = ForecastConfig()
