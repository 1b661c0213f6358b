"""Structured forecast table: what the renderer produces and adapters consume."""

from dataclasses import dataclass, field
from enum import StrEnum

from skywatch.models.common import Coordinate

COLUMNS: tuple[str, ...] = (
    "Time",
    "Temperature",
    "Weather",
    "Daytime",
    "Precipitation Probability",
    "Moonlight",
    "Recommendation",
)


class RowKind(StrEnum):
    DAY_TITLE = "day_title"
    CELESTIAL = "celestial"
    FORECAST = "forecast"


@dataclass(frozen=True)
class TableCell:
    text: str
    colspan: int = 1
    background: str | None = None


@dataclass(frozen=True)
class TableRow:
    kind: RowKind
    cells: tuple[TableCell, ...]
    background: str | None = None
    day_of_week: int | None = None  # 0 = Sunday
    recommendation: str | None = None


@dataclass(frozen=True)
class ForecastTable:
    columns: tuple[str, ...] = COLUMNS
    rows: tuple[TableRow, ...] = ()

    def rows_of(self, kind: RowKind) -> list[TableRow]:
        return [r for r in self.rows if r.kind == kind]


@dataclass(frozen=True)
class FallbackApplied:
    """Non-fatal notice: a data source failed and a default was used."""

    source: str
    reason: str


@dataclass
class ForecastReport:
    raw_input: str
    coordinate: Coordinate | None = None
    table: ForecastTable | None = None
    error: str | None = None
    error_kind: str | None = None
    notices: list[FallbackApplied] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and self.table is not None
