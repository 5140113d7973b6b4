"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherapp.ingest.decoder import decode_forecast
from weatherapp.models.forecast import ForecastResult
from weatherapp.tests.helpers import make_payload

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def moscow_payload() -> dict:
    with open(FIXTURE_DIR / "weatherapi_forecast_moscow.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def three_day_result() -> ForecastResult:
    return decode_forecast(make_payload(days=3, hours=24, maxtemp_c=5.0))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "test-key-123", "timeout_seconds": 5},
        "forecast": {"default_location": "London", "default_days": 2},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path
