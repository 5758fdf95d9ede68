# rainwatch/comment.py
"""
Helper for a GitHub Actions comment bot: turns a `/weather <place>` comment
into a Chinese markdown reply and exposes it as step outputs.
"""
import argparse
import asyncio
import logging
import os
import re
import sys
from typing import Optional, Sequence, Tuple

import httpx

from . import config
from .errors import RainwatchError
from .logging_config import setup_logging
from .models import Location
from .outputs import write_github_outputs
from .report import format_coordinates, render_comment_reply
from .services.geocode import resolve_location
from .services.weather import fetch_forecast, open_client

logger = logging.getLogger(__name__)

COMMAND_RE = re.compile(r"^/weather\s*")


def extract_query(comment_body: str) -> str:
    query = COMMAND_RE.sub("", comment_body or "")
    query = query.replace("\r", "").replace("\n", "").strip()
    return query or config.DEFAULT_QUERY


async def answer(query: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None) -> Tuple[Location, str]:
    # geocoding then forecast, strictly one after the other
    async with open_client(transport) as client:
        location = await resolve_location(client, query)
        forecast = await fetch_forecast(client, location.latitude, location.longitude)
    return location, render_comment_reply(location, forecast)


def main(argv: Optional[Sequence[str]] = None,
         transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    parser = argparse.ArgumentParser(prog="rainwatch-comment",
                                     description="Build a weather reply for a /weather comment.")
    parser.add_argument("comment", nargs="?", default="", help="issue comment body")
    argv = sys.argv[1:] if argv is None else list(argv)
    if argv[:1] in (["-h"], ["--help"]):
        parser.parse_args(argv)
    # the body is free text: "-33.86,151.2" must not be read as a flag
    args = parser.parse_args(["--", *argv] if argv else [])
    setup_logging(config.LOG_LEVEL or "INFO")

    query = extract_query(args.comment)
    logger.info("Extracted argument: %s", query)

    try:
        location, reply = asyncio.run(answer(query, transport))
    except RainwatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    latitude, longitude = format_coordinates(location)
    outputs = {
        "LATITUDE": latitude,
        "LONGITUDE": longitude,
        "DISPLAY_NAME": location.display_name,
    }
    for key, value in outputs.items():
        print(f"{key}={value}")
    print(f"WEATHER_REPLY={reply}")

    github_output = os.getenv("GITHUB_OUTPUT")
    if github_output:
        write_github_outputs(github_output, outputs, {"WEATHER_REPLY": reply})
        logger.info("Wrote step outputs to %s", github_output)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
