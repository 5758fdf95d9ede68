from pydantic import BaseModel, Field
from typing import List, Optional


class Location(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    display_name: str
    # raw "lat,lon" parts when the user typed coordinates
    latitude_text: Optional[str] = None
    longitude_text: Optional[str] = None


class GeocodingResult(BaseModel):
    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None


class GeocodingResponse(BaseModel):
    results: List[GeocodingResult] = []


class CurrentConditions(BaseModel):
    time: Optional[str] = None
    temperature_2m: Optional[float] = None
    apparent_temperature: Optional[float] = None
    relative_humidity_2m: Optional[float] = None
    precipitation: Optional[float] = None
    wind_speed_10m: Optional[float] = None


class HourlyPoint(BaseModel):
    time: str
    probability: int


class HourlySeries(BaseModel):
    time: Optional[List[str]] = None
    precipitation_probability: Optional[List[Optional[int]]] = None

    def points(self) -> List[HourlyPoint]:
        # null probability counts as 0
        times = self.time or []
        probs = self.precipitation_probability or []
        return [
            HourlyPoint(time=t, probability=probs[i] if i < len(probs) and probs[i] is not None else 0)
            for i, t in enumerate(times)
        ]


class ForecastResponse(BaseModel):
    timezone: Optional[str] = None
    current: Optional[CurrentConditions] = None
    hourly: Optional[HourlySeries] = None


class RainSummary(BaseModel):
    max_probability: Optional[int] = None
    first_high_time: Optional[str] = None
