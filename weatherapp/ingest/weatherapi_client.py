"""WeatherAPI.com forecast client."""

import logging

import httpx

from weatherapp.config.defaults import DEFAULT_TIMEOUT_SECONDS, WEATHERAPI_BASE_URL
from weatherapp.config.schema import ApiConfig
from weatherapp.ingest.decoder import decode_forecast
from weatherapp.ingest.errors import DecodeError, NetworkError, WeatherApiError
from weatherapp.models.forecast import ForecastResult, Query

logger = logging.getLogger(__name__)


class WeatherApiClient:
    """Async client for the forecast.json endpoint.

    One GET per fetch; no caching, no retries. Transport failures and non-2xx
    responses raise NetworkError, unparseable payloads raise DecodeError.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHERAPI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        if not api_key:
            raise WeatherApiError("WeatherAPI key not set")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ApiConfig) -> "WeatherApiClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    async def fetch(self, query: Query) -> ForecastResult:
        url = f"{self.base_url}/forecast.json"
        params = {"key": self.api_key, "q": query.location, "days": query.days}
        logger.debug("GET %s q=%s days=%d", url, query.location, query.days)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error("WeatherAPI request timed out for q=%s: %s", query.location, e)
            raise NetworkError(str(e)) from e
        except httpx.RequestError as e:
            logger.error("WeatherAPI request failed for q=%s: %s", query.location, e)
            raise NetworkError(f"Request failed: {e}") from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.error("WeatherAPI %d for q=%s: %s", resp.status_code, query.location, message)
            raise NetworkError(f"HTTP {resp.status_code}: {message}", resp.status_code)

        try:
            raw = resp.json()
        except ValueError as e:
            logger.error("WeatherAPI returned non-JSON body for q=%s", query.location)
            raise DecodeError(f"Invalid JSON: {e}", resp.status_code) from e

        try:
            return decode_forecast(raw)
        except DecodeError as e:
            logger.error("WeatherAPI payload mismatch for q=%s: %s", query.location, e)
            raise


def _error_message(resp: httpx.Response) -> str:
    """Extract the message from WeatherAPI's {"error": {"message": ...}} body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return resp.text or resp.reason_phrase
