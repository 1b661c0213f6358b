"""Normalized sun/moon data, independent of the provider that produced it."""

from dataclasses import dataclass
from collections.abc import Iterable
from datetime import date, time
from enum import StrEnum

from skywatch.models.forecast import DailyPeriod


class CelestialSource(StrEnum):
    USNO = "usno"
    DAILY_FORECAST = "daily"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CelestialEvent:
    phenomenon: str  # "Rise", "Set", "Upper Transit", ...
    time: time | None


@dataclass(frozen=True)
class CelestialData:
    sun_events: tuple[CelestialEvent, ...] = ()
    moon_events: tuple[CelestialEvent, ...] = ()
    moon_illumination: float | None = None  # fraction 0..1
    moon_phase: str | None = None
    source: CelestialSource = CelestialSource.USNO
    fallback: bool = False
    fallback_reason: str | None = None

    @classmethod
    def unavailable(cls, reason: str = "celestial data unavailable") -> "CelestialData":
        return cls(
            moon_illumination=0.0,
            source=CelestialSource.FALLBACK,
            fallback=True,
            fallback_reason=reason,
        )

    @property
    def sunrise(self) -> time | None:
        return _find(self.sun_events, "Rise")

    @property
    def sunset(self) -> time | None:
        return _find(self.sun_events, "Set")

    @property
    def moonrise(self) -> time | None:
        return _find(self.moon_events, "Rise")

    @property
    def moonset(self) -> time | None:
        return _find(self.moon_events, "Set")


def _find(events: tuple[CelestialEvent, ...], phenomenon: str) -> time | None:
    for event in events:
        if event.phenomenon == phenomenon:
            return event.time
    return None


def from_daily_periods(daily: Iterable[DailyPeriod], day: date) -> CelestialData:
    """Build sun events from the first daily period on the given date."""
    for period in daily:
        if period.start_time.date() == day:
            events = []
            if period.sunrise is not None:
                events.append(CelestialEvent("Rise", period.sunrise.time()))
            if period.sunset is not None:
                events.append(CelestialEvent("Set", period.sunset.time()))
            return CelestialData(sun_events=tuple(events), source=CelestialSource.DAILY_FORECAST)
    return CelestialData(source=CelestialSource.DAILY_FORECAST)
