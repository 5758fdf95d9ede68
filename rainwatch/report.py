# rainwatch/report.py
from datetime import datetime
from typing import List, Optional, Tuple

from . import config
from .errors import WeatherDataError
from .models import CurrentConditions, ForecastResponse, HourlyPoint, Location, RainSummary


def format_number(value) -> str:
    """Render a JSON number the way it arrived: 18.0 -> "18", None -> "null"."""
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_coordinates(location: Location) -> Tuple[str, str]:
    """Typed-in coordinates are echoed as written, looked-up ones as numbers."""
    return (
        location.latitude_text or format_number(location.latitude),
        location.longitude_text or format_number(location.longitude),
    )


def _not_before(time: str, now: str) -> bool:
    try:
        # wall-clock comparison: an offset on only one side must not break ordering
        return (datetime.fromisoformat(time).replace(tzinfo=None)
                >= datetime.fromisoformat(now).replace(tzinfo=None))
    except ValueError:
        # unparseable stamps: Open-Meteo local times are fixed-width, so text order holds
        return time >= now


def _reformat(timestamp: Optional[str], fmt: str) -> str:
    if timestamp is None:
        return "null"
    try:
        return datetime.fromisoformat(timestamp).strftime(fmt)
    except ValueError:
        return timestamp


def require_complete(forecast: ForecastResponse) -> None:
    current, hourly = forecast.current, forecast.hourly
    if current is None or hourly is None:
        raise WeatherDataError()
    if hourly.time is None or hourly.precipitation_probability is None:
        raise WeatherDataError()
    if current.time is None or current.temperature_2m is None:
        raise WeatherDataError()
    if None in (current.apparent_temperature, current.relative_humidity_2m,
                current.precipitation, current.wind_speed_10m):
        raise WeatherDataError()


def select_window(points: List[HourlyPoint], now: Optional[str] = None,
                  size: int = config.WINDOW_HOURS) -> List[HourlyPoint]:
    if now is not None:
        points = [p for p in points if _not_before(p.time, now)]
    return points[:size]


def summarize(window: List[HourlyPoint]) -> RainSummary:
    if not window:
        return RainSummary()
    first_high = next((p.time for p in window if p.probability >= config.HIGH_PROBABILITY), None)
    return RainSummary(
        max_probability=max(p.probability for p in window),
        first_high_time=first_high,
    )


def render_cli_report(forecast: ForecastResponse) -> str:
    require_complete(forecast)
    c = forecast.current
    window = select_window(forecast.hourly.points(), now=c.time)
    summary = summarize(window)

    max_text = "N/A" if summary.max_probability is None else f"{summary.max_probability}%"
    lines = [
        f"Local time: {c.time}",
        f"Temperature: {format_number(c.temperature_2m)}°C (feels {format_number(c.apparent_temperature)}°C)",
        f"Humidity: {format_number(c.relative_humidity_2m)}%  Wind: {format_number(c.wind_speed_10m)} km/h",
        f"Precipitation: {format_number(c.precipitation)} mm",
        f"Max precip probability next 24h: {max_text}",
    ]
    if summary.first_high_time:
        lines.append(f"Next hour ≥50%: {summary.first_high_time}")
    return "\n".join(lines)


def render_comment_reply(location: Location, forecast: ForecastResponse) -> str:
    # no structural validation here: absent values show up as "null"
    latitude, longitude = format_coordinates(location)
    c = forecast.current or CurrentConditions()
    points = forecast.hourly.points() if forecast.hourly else []
    summary = summarize(select_window(points))

    if summary.first_high_time:
        rain_info = f"下一个≥50%降雨概率时段: {_reformat(summary.first_high_time, '%m月%d日 %H:%M')}"
    else:
        rain_info = "未来24小时内无明显降雨时段"

    return f"""## 🌤️ 天气信息

**📍 位置**: {location.display_name} ({latitude}, {longitude})

**🕐 当前时间**: {_reformat(c.time, '%Y年%m月%d日 %H:%M')}

**🌡️ 温度**: {format_number(c.temperature_2m)}°C (体感 {format_number(c.apparent_temperature)}°C)

**💧 湿度**: {format_number(c.relative_humidity_2m)}%

**🌧️ 当前降水**: {format_number(c.precipitation)}mm

**💨 风速**: {format_number(c.wind_speed_10m)}km/h

**☔ 未来24小时最高降雨概率**: {format_number(summary.max_probability)}%

**🕐 {rain_info}**

---
*数据来源: Open-Meteo API*"""
