"""CLI entry point for the night-sky forecast."""

import argparse
import logging
import sys

from skywatch.config.loader import get_config_value, load_config
from skywatch.pipeline.forecast_pipeline import ForecastPipeline
from skywatch.reporting.formatters import (
    format_report_json,
    format_table_html,
    format_table_text,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skywatch",
        description="Hourly forecast with night-sky recommendations",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Forecast for a coordinate")
    fc_p.add_argument("coordinates", help='"<latitude>, <longitude>"')
    fc_p.add_argument(
        "--format", choices=["text", "json", "html"], default="text", help="Output format"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. display.layout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config, args) -> int:
    report = ForecastPipeline(config).run(args.coordinates)

    if args.format == "json":
        print(format_report_json(report))
        return 0 if report.ok else 1

    if not report.ok:
        print(f"Error: {report.error}", file=sys.stderr)
        return 1
    for notice in report.notices:
        print(f"Note: {notice.source} unavailable ({notice.reason})", file=sys.stderr)
    if args.format == "html":
        print(format_table_html(report.table))
    else:
        print(format_table_text(report.table))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1


if __name__ == "__main__":
    sys.exit(main())
