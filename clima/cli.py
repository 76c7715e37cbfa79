"""CLI entry point for weather lookups."""

import argparse
import asyncio
import json
import logging

from clima.config.defaults import LOCATION_PLACEHOLDER
from clima.config.loader import load_config, redacted
from clima.config.schema import ConfigurationError
from clima.ingest.weather_client import WeatherClient
from clima.models.condition import classify
from clima.models.weather import CityQuery, Coordinate, Success, WeatherFailure, WeatherRecord


class ConsoleDelegate:
    """Prints fetch outcomes to stdout."""

    def on_weather_updated(self, client: WeatherClient, record: WeatherRecord) -> None:
        print(
            f"{record.city_name}: {record.temperature_string}°C "
            f"{record.condition_name} ({record.condition_category})"
        )

    def on_weather_failed(self, client: WeatherClient, failure: WeatherFailure) -> None:
        print(f"Error: {failure.message}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="clima",
        description="Current weather lookup",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Fetch current weather")
    weather_p.add_argument("--city", help="City name")
    weather_p.add_argument("--lat", type=float, help="Latitude")
    weather_p.add_argument("--lon", type=float, help="Longitude")

    # classify
    classify_p = sub.add_parser("classify", help="Show the category for a condition code")
    classify_p.add_argument("code", type=int)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "classify":
        return _cmd_classify(args)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 2

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_weather(config, args) -> int:
    if args.city is not None:
        if not args.city.strip():
            print(LOCATION_PLACEHOLDER)
            return 1
        query = CityQuery(args.city.strip())
    elif args.lat is not None and args.lon is not None:
        query = Coordinate(args.lat, args.lon)
    else:
        print("Use: weather --city NAME | weather --lat LAT --lon LON")
        return 1

    try:
        client = WeatherClient(config, delegate=ConsoleDelegate())
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 2

    outcome = asyncio.run(client.fetch(query))
    return 0 if isinstance(outcome, Success) else 1


def _cmd_classify(args) -> int:
    category = classify(args.code)
    print(f"{args.code}: {category} ({category.symbol})")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(json.dumps(redacted(config), indent=2))
        return 0
    else:
        print("Use: config show")
        return 1
