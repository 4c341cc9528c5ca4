"""CLI entry point for the wtr forecast client."""

import argparse
import logging
import sys

from wtr.config.loader import load_config
from wtr.errors import AcquisitionError, ParseError
from wtr.locations.directory import is_number, resolve, search
from wtr.locations.registry import LOCATIONS
from wtr.models.location import SearchMode
from wtr.pipeline.acquisition import build_service
from wtr.reporting.formatters import (
    format_forecast_json,
    format_forecast_text,
    format_location_text,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wtr",
        description="Get weather forecasts",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="More logging (-vv for debug)",
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser(
        "search", help="Search locations whose name contains QUERY"
    )
    search_p.add_argument("query")

    # forecast
    fc_p = sub.add_parser(
        "forecast",
        help="Get weather forecasts for a location (code or exact name)",
    )
    fc_p.add_argument("query")
    fc_p.add_argument(
        "--hour", action="store_true", help="Show hourly forecast"
    )
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "search":
        return _cmd_search(args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_search(args) -> int:
    results = search(args.query, SearchMode.PARTIAL_NAME)
    for loc in results:
        print(format_location_text(loc))
        print()
    count = len(results)
    print(
        f"{count} location{'s' if count != 1 else ''} found "
        f"({len(LOCATIONS)} locations available).\n"
    )
    return 0


def _cmd_forecast(config, args) -> int:
    location = resolve(args.query)
    if location is None:
        attribute = "code" if is_number(args.query) else "name"
        print(f"Location with {attribute} '{args.query}' not found.")
        return 1

    service = build_service(config)
    try:
        forecast = service.get_forecast(location.code)
    except AcquisitionError as e:
        print(f"Error: forecast {e.stage} failure: {e.detail}", file=sys.stderr)
        return 1
    except ParseError as e:
        print(f"Error: cached forecast is unreadable: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(format_forecast_json(forecast))
    else:
        print(f"Weather forecasts for {location.name} ({location.province})\n")
        print(format_forecast_text(forecast, details=args.hour))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
