"""Celestial fetcher: USNO sun/moon data with a zero-illumination fallback.

parse_usno_payload normalizes USNO one-day documents into CelestialData.
"""

import logging
import re
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from skywatch.ingest.nws_client import FetchError
from skywatch.ingest.usno_client import UsnoClient
from skywatch.models.celestial import CelestialData, CelestialEvent, CelestialSource
from skywatch.models.common import Coordinate, utc_now

logger = logging.getLogger(__name__)

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})")


class CelestialPayloadError(ValueError):
    """Raised when a celestial payload does not have the expected shape."""


class CelestialFetcher:
    def __init__(self, usno_client: UsnoClient):
        self.usno = usno_client

    def fetch(
        self,
        coord: Coordinate,
        time_zone: str | None = None,
        now: datetime | None = None,
    ) -> CelestialData:
        """Fetch today's celestial data for a coordinate. Never raises on provider failure."""
        on_date, offset = local_date_and_offset(time_zone, now)
        try:
            raw = self.usno.get_oneday(coord, on_date, offset)
            data = parse_usno_payload(raw)
        except (FetchError, CelestialPayloadError) as e:
            logger.warning("Celestial data unavailable for %s: %s", coord.as_query(), e)
            return CelestialData.unavailable(str(e))
        logger.info(
            "Celestial data for %s on %s: illumination=%s",
            coord.as_query(), on_date, data.moon_illumination,
        )
        return data


def local_date_and_offset(
    time_zone: str | None, now: datetime | None = None
) -> tuple[date, float]:
    """Return the local date and UTC offset in hours at the target location.

    Uses the IANA zone when known; otherwise the host clock's offset.
    """
    instant = now or utc_now()
    if instant.tzinfo is None:
        instant = instant.astimezone()
    if time_zone:
        try:
            local = instant.astimezone(ZoneInfo(time_zone))
        except (ZoneInfoNotFoundError, TypeError, ValueError):
            logger.warning("Unknown time zone %r, using host clock offset", time_zone)
            local = instant.astimezone()
    else:
        logger.info("No time zone for location, using host clock offset")
        local = instant.astimezone()
    offset = local.utcoffset()
    hours = offset.total_seconds() / 3600 if offset is not None else 0.0
    return local.date(), hours


def parse_usno_payload(raw: Any) -> CelestialData:
    """Normalize a USNO rstt/oneday document."""
    try:
        data = raw["properties"]["data"]
    except (KeyError, TypeError) as e:
        raise CelestialPayloadError("USNO payload missing properties.data") from e
    if not isinstance(data, dict):
        raise CelestialPayloadError("USNO properties.data is not an object")

    return CelestialData(
        sun_events=_events(data.get("sundata", []), "sundata"),
        moon_events=_events(data.get("moondata", []), "moondata"),
        moon_illumination=parse_illumination(data.get("fracillum")),
        moon_phase=data.get("curphase"),
        source=CelestialSource.USNO,
    )


def parse_illumination(value: Any) -> float | None:
    """Accept "87%", 87, or 0.87 and return a 0..1 fraction."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        text = value.strip()
        percent = text.endswith("%")
        try:
            number = float(text.rstrip("%").strip())
        except ValueError as e:
            raise CelestialPayloadError(f"Bad fracillum: {value!r}") from e
        fraction = number / 100 if percent or number > 1 else number
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        fraction = value / 100 if value > 1 else float(value)
    else:
        raise CelestialPayloadError(f"Bad fracillum: {value!r}")
    if not 0.0 <= fraction <= 1.0:
        raise CelestialPayloadError(f"fracillum out of range: {value!r}")
    return fraction


def parse_clock(text: Any) -> time | None:
    """Parse "HH:MM"; USNO reports "24:00" for events at local midnight."""
    if not isinstance(text, str):
        return None
    match = _CLOCK_RE.match(text)
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 24 or minute > 59:
        return None
    return time(hour % 24, minute)


def _events(items: Any, name: str) -> tuple[CelestialEvent, ...]:
    if not isinstance(items, list):
        raise CelestialPayloadError(f"USNO {name} is not a list")
    events = []
    for item in items:
        if not isinstance(item, dict) or "phen" not in item:
            raise CelestialPayloadError(f"Malformed {name} entry: {item!r}")
        events.append(CelestialEvent(phenomenon=item["phen"], time=parse_clock(item.get("time"))))
    return tuple(events)
