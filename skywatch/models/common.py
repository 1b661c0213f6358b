"""Common types and helpers shared across models."""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def as_query(self) -> str:
        """Render as "lat,lon" with at most four decimals (NWS rejects finer)."""
        return f"{_trim(self.latitude)},{_trim(self.longitude)}"


def _trim(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def utc_now() -> datetime:
    return datetime.now(UTC)
