# rainwatch/services/geocode.py
import logging
import re
from typing import Optional

import httpx
from pydantic import ValidationError

from .. import config
from ..models import GeocodingResponse, Location

logger = logging.getLogger(__name__)

COORDINATES_RE = re.compile(r"^(-?\d+(?:\.\d*)?),(-?\d+(?:\.\d*)?)$")


def fallback_location() -> Location:
    return Location(
        latitude=config.DEFAULT_LATITUDE,
        longitude=config.DEFAULT_LONGITUDE,
        display_name=config.FALLBACK_DISPLAY_NAME,
    )


def parse_coordinates(text: str) -> Optional[Location]:
    """
    Read a bare "lat,lon" pair. Returns None when the text is not shaped like
    a pair, raises ValueError when it is one but lies outside the globe.
    """
    m = COORDINATES_RE.match(text)
    if not m:
        return None
    lat, lon = float(m.group(1)), float(m.group(2))
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise ValueError(f"coordinates out of range: {text}")
    return Location(latitude=lat, longitude=lon, display_name=text,
                    latitude_text=m.group(1), longitude_text=m.group(2))


async def geocode(client: httpx.AsyncClient, name: str) -> Optional[Location]:
    params = {"name": name, "count": 1, "language": "zh", "format": "json"}
    r = await client.get(config.GEOCODING_URL, params=params)
    logger.info("Geocoding URL: %s", r.request.url)
    r.raise_for_status()
    logger.info("Geocoding response: %s", r.text)

    data = GeocodingResponse.model_validate(r.json())
    if not data.results:
        return None
    first = data.results[0]
    display_name = first.name
    if first.country:
        display_name = f"{display_name}, {first.country}"
    return Location(latitude=first.latitude, longitude=first.longitude, display_name=display_name)


async def resolve_location(client: httpx.AsyncClient, text: str) -> Location:
    """
    Resolve free text to a Location:
      1) a "lat,lon" pair is used as-is
      2) anything else goes through Open-Meteo geocoding
      3) any failure falls back to Shanghai so the bot always answers
    """
    try:
        loc = parse_coordinates(text)
    except ValueError as e:
        logger.warning("%s, falling back to Shanghai", e)
        return fallback_location()
    if loc is not None:
        logger.info("Using coordinates directly: %s", text)
        return loc

    logger.info("Geocoding location: %s", text)
    try:
        loc = await geocode(client, text)
    except httpx.HTTPError as e:
        logger.warning("Geocoding request failed: %s", e)
        loc = None
    except (ValueError, ValidationError) as e:
        logger.warning("Geocoding response unreadable: %s", e)
        loc = None

    if loc is None:
        logger.warning("Geocoding failed, falling back to Shanghai")
        return fallback_location()
    return loc
