"""NWS forecast data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GridPoint:
    grid_id: str
    grid_x: int
    grid_y: int
    forecast_url: str
    forecast_hourly_url: str
    time_zone: str | None = None


@dataclass(frozen=True)
class ForecastPeriod:
    number: int
    name: str
    start_time: datetime
    end_time: datetime
    is_daytime: bool
    temperature: float
    temperature_unit: str
    short_forecast: str
    precipitation_probability: float | None = None


@dataclass(frozen=True)
class DailyPeriod(ForecastPeriod):
    sunrise: datetime | None = None
    sunset: datetime | None = None


@dataclass(frozen=True)
class ForecastBundle:
    grid: GridPoint
    hourly: tuple[ForecastPeriod, ...]
    daily: tuple[DailyPeriod, ...]
