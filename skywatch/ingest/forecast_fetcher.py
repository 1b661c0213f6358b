"""Forecast fetcher: resolves the NWS grid for a coordinate and loads both forecasts."""

import logging
from datetime import datetime
from typing import Any

from skywatch.ingest.nws_client import FetchError, NwsClient
from skywatch.models.common import Coordinate
from skywatch.models.forecast import DailyPeriod, ForecastBundle, ForecastPeriod, GridPoint

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, nws_client: NwsClient):
        self.nws = nws_client

    def fetch(self, coord: Coordinate) -> ForecastBundle:
        """Resolve the grid point, then fetch hourly and daily periods.

        Any failure raises FetchError; nothing is retried here.
        """
        point_url = self.nws.point_url(coord)
        grid = parse_point(self.nws.get_point(coord), point_url)
        logger.info(
            "Resolved %s to grid %s/%d,%d (tz=%s)",
            coord.as_query(), grid.grid_id, grid.grid_x, grid.grid_y, grid.time_zone,
        )

        hourly_raw = self.nws.get_document(grid.forecast_hourly_url)
        hourly = tuple(
            parse_period(p, grid.forecast_hourly_url)
            for p in _periods(hourly_raw, grid.forecast_hourly_url)
        )

        daily_raw = self.nws.get_document(grid.forecast_url)
        daily = tuple(
            parse_daily_period(p, grid.forecast_url)
            for p in _periods(daily_raw, grid.forecast_url)
        )

        logger.info("Fetched %d hourly and %d daily periods", len(hourly), len(daily))
        return ForecastBundle(grid=grid, hourly=hourly, daily=daily)


def parse_point(raw: Any, url: str = "") -> GridPoint:
    """Extract grid identifiers and forecast URLs from a /points document."""
    props = _properties(raw, url)
    forecast_url = props.get("forecast")
    hourly_url = props.get("forecastHourly")
    if not isinstance(forecast_url, str) or not isinstance(hourly_url, str):
        raise FetchError("Malformed point response: missing forecast URLs", url=url)
    try:
        grid_x = int(props.get("gridX", 0))
        grid_y = int(props.get("gridY", 0))
    except (TypeError, ValueError) as e:
        raise FetchError("Malformed point response: bad grid coordinates", url=url) from e
    time_zone = props.get("timeZone")
    return GridPoint(
        grid_id=str(props.get("gridId", "")),
        grid_x=grid_x,
        grid_y=grid_y,
        forecast_url=forecast_url,
        forecast_hourly_url=hourly_url,
        time_zone=time_zone if isinstance(time_zone, str) else None,
    )


def parse_period(raw: Any, url: str = "") -> ForecastPeriod:
    return ForecastPeriod(**_period_fields(raw, url))


def parse_daily_period(raw: Any, url: str = "") -> DailyPeriod:
    fields = _period_fields(raw, url)
    return DailyPeriod(
        **fields,
        sunrise=_optional_time(raw.get("sunrise"), url),
        sunset=_optional_time(raw.get("sunset"), url),
    )


def _period_fields(raw: Any, url: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise FetchError("Malformed forecast period", url=url)
    try:
        start = datetime.fromisoformat(raw["startTime"])
        end = datetime.fromisoformat(raw.get("endTime") or raw["startTime"])
        temperature = _number(raw["temperature"])
        number = int(raw.get("number", 0))
        name = _text(raw, "name", "")
        unit = _text(raw, "temperatureUnit", "F")
        short_forecast = _text(raw, "shortForecast", "")
    except (KeyError, TypeError, ValueError) as e:
        raise FetchError(f"Malformed forecast period: {e}", url=url) from e

    return {
        "number": number,
        "name": name,
        "start_time": start,
        "end_time": end,
        "is_daytime": bool(raw.get("isDaytime", False)),
        "temperature": temperature,
        "temperature_unit": unit,
        "short_forecast": short_forecast,
        "precipitation_probability": _precipitation(raw.get("probabilityOfPrecipitation")),
    }


def _number(value: Any) -> float:
    # Newer NWS payloads wrap values as {"unitCode": ..., "value": ...}.
    if isinstance(value, dict):
        value = value["value"]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"not a number: {value!r}")
    return value


def _text(raw: dict, key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key} is not a string: {value!r}")
    return value


def _precipitation(value: Any) -> float | None:
    if isinstance(value, dict):
        value = value.get("value")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _optional_time(value: Any, url: str) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise FetchError(f"Malformed sunrise/sunset: {value!r}", url=url) from e


def _properties(raw: Any, url: str) -> dict:
    props = raw.get("properties") if isinstance(raw, dict) else None
    if not isinstance(props, dict):
        raise FetchError("Malformed response: no properties", url=url)
    return props


def _periods(raw: Any, url: str) -> list:
    periods = _properties(raw, url).get("periods")
    if not isinstance(periods, list):
        raise FetchError("Malformed forecast response: no periods", url=url)
    return periods
