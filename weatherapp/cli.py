"""CLI entry point for the forecast client."""

import argparse
import asyncio
import logging

from pydantic import ValidationError

from weatherapp.config.loader import ConfigError, load_config, masked_config_json
from weatherapp.config.schema import AppConfig
from weatherapp.controller.fetch_controller import FetchController
from weatherapp.ingest.errors import WeatherApiError
from weatherapp.ingest.weatherapi_client import WeatherApiClient
from weatherapp.models.forecast import Query
from weatherapp.models.state import StateKind
from weatherapp.view.terminal import TerminalView

DEFAULT_CONFIG = "weatherapp.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Three-day weather forecast client",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch and print a forecast")
    fc_p.add_argument("--location", help="Place name or 'lat,lon'")
    fc_p.add_argument("--days", type=int, help="Forecast horizon in days")
    fc_p.add_argument(
        "--json", action="store_true", help="Print the forecast as JSON"
    )
    fc_p.add_argument(
        "--retries", type=int, default=0,
        help="Refresh again up to N times after an error",
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (ConfigError, ValidationError) as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config: AppConfig, args) -> int:
    try:
        query = Query(
            location=args.location or config.forecast.default_location,
            days=args.days if args.days is not None else config.forecast.default_days,
        )
        client = WeatherApiClient.from_config(config.api)
    except (ValueError, WeatherApiError) as e:
        print(f"Error: {e}")
        return 1
    return asyncio.run(_run_forecast(client, config, query, args))


async def _run_forecast(client: WeatherApiClient, config: AppConfig, query: Query, args) -> int:
    async with FetchController(
        client, query, error_fallback=config.forecast.error_fallback
    ) as controller:
        view = TerminalView(controller, as_json=args.json, show_loading=not args.json)
        view.attach()
        state = await controller.wait()
        attempts = 0
        while state.kind == StateKind.ERROR and attempts < args.retries:
            attempts += 1
            state = await view.retry()
        view.detach()
        return 0 if state.kind == StateKind.SUCCESS else 1


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    else:
        print("Use: config show")
        return 1
