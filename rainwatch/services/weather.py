# rainwatch/services/weather.py
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .. import config
from ..errors import WeatherAPIError, WeatherDataError
from ..models import ForecastResponse

logger = logging.getLogger(__name__)


def open_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.HTTP_TIMEOUT, headers=config.HEADERS, transport=transport)


def build_forecast_params(lat: float, lon: float, timezone: str = "auto",
                          forecast_days: Optional[int] = None) -> dict:
    params = {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(config.CURRENT_FIELDS),
        "hourly": "precipitation_probability",
        "timezone": timezone,
    }
    if forecast_days is not None:
        params["forecast_days"] = forecast_days
    return params


async def fetch_forecast(client: httpx.AsyncClient, lat: float, lon: float,
                         timezone: str = "auto",
                         forecast_days: Optional[int] = None) -> ForecastResponse:
    """
    Single GET against the Open-Meteo forecast endpoint.
    No retries: a transport error or non-2xx status raises WeatherAPIError,
    an unreadable body raises WeatherDataError.
    """
    params = build_forecast_params(lat, lon, timezone, forecast_days)
    try:
        r = await client.get(config.FORECAST_URL, params=params)
        logger.info("Weather URL: %s", r.request.url)
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("Open-Meteo returned %s for url %s", e.response.status_code, e.request.url)
        raise WeatherAPIError() from e
    except httpx.HTTPError as e:
        logger.error("Network error: %s", e)
        raise WeatherAPIError() from e

    logger.info("Weather response: %s", r.text)
    try:
        return ForecastResponse.model_validate(r.json())
    except (ValueError, ValidationError) as e:
        raise WeatherDataError() from e
