"""Decoder: converts a raw forecast.json payload into a ForecastResult."""

from typing import Any

from weatherapp.ingest.errors import DecodeError
from weatherapp.models.forecast import (
    Condition,
    Current,
    Day,
    ForecastDay,
    ForecastResult,
    Hour,
    Location,
)


def decode_forecast(raw: Any) -> ForecastResult:
    """Decode a WeatherAPI forecast payload.

    Raises DecodeError naming the offending path when a required field is
    missing or has the wrong type. Unknown fields are ignored.
    """
    root = _obj(raw, "$")
    location = _location(_get(root, "location", "location"), "location")
    current = _current(_get(root, "current", "current"), "current")
    forecast = _obj(_get(root, "forecast", "forecast"), "forecast")
    days = _list(
        _get(forecast, "forecastday", "forecast.forecastday"),
        "forecast.forecastday",
    )
    return ForecastResult(
        location=location,
        current=current,
        forecast=tuple(
            _forecast_day(d, f"forecast.forecastday[{i}]")
            for i, d in enumerate(days)
        ),
    )


def _location(raw: Any, path: str) -> Location:
    obj = _obj(raw, path)
    return Location(
        name=_str(obj, "name", path),
        region=_str(obj, "region", path),
        country=_str(obj, "country", path),
        localtime=_str(obj, "localtime", path),
    )


def _current(raw: Any, path: str) -> Current:
    obj = _obj(raw, path)
    return Current(
        temp_c=_float(obj, "temp_c", path),
        condition=_condition(_get(obj, "condition", f"{path}.condition"), f"{path}.condition"),
        wind_kph=_float(obj, "wind_kph", path),
        humidity=_int(obj, "humidity", path),
    )


def _forecast_day(raw: Any, path: str) -> ForecastDay:
    obj = _obj(raw, path)
    hours = _list(_get(obj, "hour", f"{path}.hour"), f"{path}.hour")
    return ForecastDay(
        date=_str(obj, "date", path),
        day=_day(_get(obj, "day", f"{path}.day"), f"{path}.day"),
        hour=tuple(_hour(h, f"{path}.hour[{i}]") for i, h in enumerate(hours)),
    )


def _day(raw: Any, path: str) -> Day:
    obj = _obj(raw, path)
    return Day(
        maxtemp_c=_float(obj, "maxtemp_c", path),
        mintemp_c=_float(obj, "mintemp_c", path),
        condition=_condition(_get(obj, "condition", f"{path}.condition"), f"{path}.condition"),
    )


def _hour(raw: Any, path: str) -> Hour:
    obj = _obj(raw, path)
    return Hour(
        time=_str(obj, "time", path),
        temp_c=_float(obj, "temp_c", path),
        condition=_condition(_get(obj, "condition", f"{path}.condition"), f"{path}.condition"),
    )


def _condition(raw: Any, path: str) -> Condition:
    obj = _obj(raw, path)
    return Condition(text=_str(obj, "text", path), icon=_str(obj, "icon", path))


# --- Field helpers ---


def _get(obj: dict, key: str, path: str) -> Any:
    if key not in obj:
        raise DecodeError(f"Missing field: {path}")
    return obj[key]


def _obj(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected object at {path}, got {type(value).__name__}")
    return value


def _list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise DecodeError(f"Expected list at {path}, got {type(value).__name__}")
    return value


def _str(obj: dict, key: str, path: str) -> str:
    value = _get(obj, key, f"{path}.{key}")
    if not isinstance(value, str):
        raise DecodeError(f"Expected string at {path}.{key}, got {type(value).__name__}")
    return value


def _float(obj: dict, key: str, path: str) -> float:
    value = _get(obj, key, f"{path}.{key}")
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Expected number at {path}.{key}, got {type(value).__name__}")
    return float(value)


def _int(obj: dict, key: str, path: str) -> int:
    value = _get(obj, key, f"{path}.{key}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Expected integer at {path}.{key}, got {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise DecodeError(f"Expected integer at {path}.{key}, got {value}")
    return int(value)
