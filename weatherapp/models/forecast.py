"""WeatherAPI forecast data models."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Query:
    location: str  # place name or "lat,lon"
    days: int = 3

    def __post_init__(self) -> None:
        if not self.location or not self.location.strip():
            raise ValueError("Query location must be non-empty")
        if self.days < 1:
            raise ValueError(f"Query days must be >= 1, got {self.days}")


@dataclass(frozen=True)
class Condition:
    text: str
    icon: str  # protocol-relative, e.g. //cdn.weatherapi.com/...


@dataclass(frozen=True)
class Location:
    name: str
    region: str
    country: str
    localtime: str


@dataclass(frozen=True)
class Current:
    temp_c: float
    condition: Condition
    wind_kph: float
    humidity: int


@dataclass(frozen=True)
class Day:
    maxtemp_c: float
    mintemp_c: float
    condition: Condition


@dataclass(frozen=True)
class Hour:
    time: str  # YYYY-MM-DD HH:MM
    temp_c: float
    condition: Condition


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    day: Day
    hour: tuple[Hour, ...]


@dataclass(frozen=True)
class ForecastResult:
    location: Location
    current: Current
    forecast: tuple[ForecastDay, ...]

    def to_dict(self) -> dict[str, Any]:
        """Nested dict in the shape of the forecast.json payload."""
        return {
            "location": asdict(self.location),
            "current": asdict(self.current),
            "forecast": {
                "forecastday": [
                    {
                        "date": d.date,
                        "day": asdict(d.day),
                        "hour": [asdict(h) for h in d.hour],
                    }
                    for d in self.forecast
                ]
            },
        }
