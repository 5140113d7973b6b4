"""Default WeatherAPI endpoint and forecast query values."""

WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"
API_KEY_ENV_VAR = "WEATHERAPI_KEY"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Moscow, city centre
DEFAULT_LOCATION = "55.7569,37.6151"
DEFAULT_DAYS = 3

DEFAULT_ERROR_MESSAGE = "Ошибка сети"
