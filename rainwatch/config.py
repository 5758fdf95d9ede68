# rainwatch/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Config
FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
GEOCODING_URL = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
USER_AGENT = os.getenv("USER_AGENT", "rainwatch/0.1.0")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15.0"))
LOG_LEVEL = os.getenv("LOG_LEVEL")

HEADERS = {"User-Agent": USER_AGENT}

# Shanghai
DEFAULT_LATITUDE = 31.2304
DEFAULT_LONGITUDE = 121.4737
DEFAULT_TIMEZONE = "Asia/Shanghai"
FALLBACK_DISPLAY_NAME = "上海, 中国"
DEFAULT_QUERY = "shanghai"

CURRENT_FIELDS = [
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "precipitation",
    "wind_speed_10m",
]
WINDOW_HOURS = 24
HIGH_PROBABILITY = 50
