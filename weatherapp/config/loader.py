"""YAML config loader with environment fallback for the API key."""

import json
import os
from pathlib import Path

import yaml

from weatherapp.config.defaults import API_KEY_ENV_VAR
from weatherapp.config.schema import AppConfig
from weatherapp.models.forecast import Query


class ConfigError(Exception):
    """Raised when a config file cannot be read as a YAML mapping."""


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields defaults. If no API key is set in the
    YAML, WEATHERAPI_KEY from the environment is used. Unparseable YAML or a
    non-mapping top level raises ConfigError; bad values raise ValidationError.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path, encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(
                f"Expected a mapping at the top of {path}, got {type(raw).__name__}"
            )

    api = raw.get("api") or {}
    raw["api"] = api
    if isinstance(api, dict) and not api.get("api_key"):
        api["api_key"] = os.environ.get(API_KEY_ENV_VAR, "")

    return AppConfig(**raw)


def default_query(config: AppConfig) -> Query:
    return Query(
        location=config.forecast.default_location,
        days=config.forecast.default_days,
    )


def masked_config_json(config: AppConfig) -> str:
    """Config as indented JSON with the API key masked."""
    data = json.loads(config.model_dump_json())
    key = data["api"]["api_key"]
    if key:
        data["api"]["api_key"] = key[:4] + "*" * max(len(key) - 4, 0)
    return json.dumps(data, indent=2, ensure_ascii=False)
