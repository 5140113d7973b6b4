"""Payload builders and test doubles shared across test modules."""

import asyncio

from weatherapp.models.forecast import ForecastResult, Query


def make_payload(days: int = 3, hours: int = 24, maxtemp_c: float = 5.0) -> dict:
    """Build a forecast.json payload with the given number of days and hours."""
    condition = {"text": "Cloudy", "icon": "//cdn.weatherapi.com/weather/64x64/day/119.png"}
    return {
        "location": {
            "name": "Moscow",
            "region": "Moscow City",
            "country": "Russia",
            "localtime": "2026-10-19 17:00",
        },
        "current": {
            "temp_c": 3.5,
            "condition": condition,
            "wind_kph": 10.8,
            "humidity": 76,
        },
        "forecast": {
            "forecastday": [
                {
                    "date": f"2026-10-{19 + d}",
                    "day": {
                        "maxtemp_c": maxtemp_c,
                        "mintemp_c": 0.5,
                        "condition": condition,
                    },
                    "hour": [
                        {
                            "time": f"2026-10-{19 + d} {h:02d}:00",
                            "temp_c": 1.0 + h / 10,
                            "condition": condition,
                        }
                        for h in range(hours)
                    ],
                }
                for d in range(days)
            ]
        },
    }


class StubSource:
    """ForecastSource double: returns a result or raises, optionally gated."""

    def __init__(
        self,
        result: ForecastResult | None = None,
        error: BaseException | None = None,
    ):
        self.result = result
        self.error = error
        self.queries: list[Query] = []
        self.gate: asyncio.Event | None = None

    async def fetch(self, query: Query) -> ForecastResult:
        self.queries.append(query)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result
