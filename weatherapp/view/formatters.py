"""Plain-text and JSON renderers for forecasts and fetch states."""

import json
from typing import assert_never

from weatherapp.models.forecast import Condition, ForecastResult
from weatherapp.models.state import FetchState, StateKind


def icon_url(condition: Condition) -> str:
    """Absolute icon URL; the API returns protocol-relative paths."""
    if condition.icon.startswith("//"):
        return f"https:{condition.icon}"
    return condition.icon


def format_hour(time: str) -> str:
    """'2026-10-19 14:00' -> '14:00'."""
    _, sep, hhmm = time.partition(" ")
    return hhmm if sep else time


def format_forecast_text(r: ForecastResult) -> str:
    """Current conditions, hourly lines for the first day, then daily lines."""
    cur = r.current
    lines = [
        f"=== {r.location.name}, {r.location.region}, {r.location.country} "
        f"({r.location.localtime}) ===",
        f"{int(cur.temp_c)}° {cur.condition.text} [{icon_url(cur.condition)}]",
        f"Wind {cur.wind_kph} km/h | Humidity {cur.humidity}%",
    ]

    if r.forecast:
        lines.append("")
        lines.append("Hourly:")
        for h in r.forecast[0].hour:
            lines.append(
                f"  {format_hour(h.time)} {int(h.temp_c)}°  "
                f"{h.condition.text} [{icon_url(h.condition)}]"
            )

    lines.append("")
    lines.append(f"{len(r.forecast)}-day forecast:")
    for d in r.forecast:
        lines.append(
            f"  {d.date}  {d.day.condition.text}  "
            f"{int(d.day.maxtemp_c)}° / {int(d.day.mintemp_c)}° "
            f"[{icon_url(d.day.condition)}]"
        )
    return "\n".join(lines)


def format_forecast_json(r: ForecastResult) -> str:
    return json.dumps(r.to_dict(), indent=2, ensure_ascii=False)


def format_state(state: FetchState, as_json: bool = False) -> str:
    match state.kind:
        case StateKind.LOADING:
            return "Loading..."
        case StateKind.ERROR:
            return f"Error: {state.message}"
        case StateKind.SUCCESS:
            assert state.result is not None
            if as_json:
                return format_forecast_json(state.result)
            return format_forecast_text(state.result)
        case _:
            assert_never(state.kind)
