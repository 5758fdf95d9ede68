# rainwatch/cli.py
import argparse
import asyncio
import logging
import os
import sys
from typing import Optional, Sequence

import httpx

from . import config
from .errors import RainwatchError
from .logging_config import setup_logging
from .report import render_cli_report
from .services.weather import fetch_forecast, open_client

logger = logging.getLogger(__name__)

# two days guarantees 24 hourly samples after the current local hour
FORECAST_DAYS = 2


def _bounded(name: str, low: float, high: float):
    def convert(value: str) -> float:
        try:
            number = float(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {name}: {value!r}")
        if not low <= number <= high:
            raise argparse.ArgumentTypeError(f"{name} must be between {low:g} and {high:g}: {value}")
        return number
    return convert


def build_parser() -> argparse.ArgumentParser:
    lat = os.getenv("LAT") or str(config.DEFAULT_LATITUDE)
    lon = os.getenv("LON") or str(config.DEFAULT_LONGITUDE)
    tz = os.getenv("TZ") or config.DEFAULT_TIMEZONE

    parser = argparse.ArgumentParser(
        prog="rainwatch",
        description="Show current weather and next-24h rain probability via Open-Meteo.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog=(
            "Defaults:\n"
            f"  LAT={lat}\n"
            f"  LON={lon}\n"
            f"  TZ={tz}\n"
            "Examples:\n"
            "  rainwatch\n"
            "  LAT=31.2 LON=121.47 rainwatch\n"
            "  rainwatch -lat 31.2304 -lon 121.4737 -tz Asia/Shanghai"
        ),
    )
    parser.add_argument("-lat", dest="latitude", metavar="<latitude>", default=lat,
                        type=_bounded("latitude", -90, 90))
    parser.add_argument("-lon", dest="longitude", metavar="<longitude>", default=lon,
                        type=_bounded("longitude", -180, 180))
    parser.add_argument("-tz", dest="timezone", metavar="<timezone>", default=tz)
    parser.add_argument("-v", "--verbose", action="store_true", help="log requests to stderr")
    return parser


async def build_report(args: argparse.Namespace,
                       transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    async with open_client(transport) as client:
        forecast = await fetch_forecast(client, args.latitude, args.longitude,
                                        timezone=args.timezone, forecast_days=FORECAST_DAYS)
    return render_cli_report(forecast)


def main(argv: Optional[Sequence[str]] = None,
         transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else config.LOG_LEVEL or "WARNING")

    try:
        report = asyncio.run(build_report(args, transport))
    except RainwatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    print(report)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
