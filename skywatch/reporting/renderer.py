"""Forecast renderer: merges hourly periods and celestial data into a day-grouped table.

Pure: inputs are not mutated and the result is an immutable ForecastTable.
"""

from collections.abc import Hashable, Sequence
from datetime import datetime, time

from skywatch.config.schema import GroupBy, Layout, SkywatchConfig
from skywatch.models.celestial import CelestialData, from_daily_periods
from skywatch.models.forecast import DailyPeriod, ForecastPeriod
from skywatch.models.table import COLUMNS, ForecastTable, RowKind, TableCell, TableRow
from skywatch.reporting.palette import day_color, day_of_week
from skywatch.signal.recommendation import recommend


def render_forecast(
    hourly: Sequence[ForecastPeriod],
    daily: Sequence[DailyPeriod],
    celestial: CelestialData,
    config: SkywatchConfig | None = None,
) -> ForecastTable:
    cfg = config or SkywatchConfig()
    keys = [group_key(p.start_time, cfg.display.group_by) for p in hourly]
    starts = set(day_group_boundaries(keys))

    rows: list[TableRow] = []
    for index, period in enumerate(hourly):
        if index in starts:
            rows.extend(_day_header_rows(period, daily, celestial, cfg))
        rows.append(_forecast_row(period, celestial, cfg))
    return ForecastTable(columns=COLUMNS, rows=tuple(rows))


def group_key(moment: datetime, group_by: GroupBy = GroupBy.WEEKDAY) -> Hashable:
    """Weekday grouping merges periods exactly a week apart; calendar_date does not."""
    if group_by == GroupBy.CALENDAR_DATE:
        return moment.date()
    return day_of_week(moment)


def day_group_boundaries(keys: Sequence[Hashable]) -> list[int]:
    """Indices where the key differs from the previous one (always includes 0)."""
    boundaries = []
    previous: object = object()
    for index, key in enumerate(keys):
        if key != previous:
            boundaries.append(index)
            previous = key
    return boundaries


def _day_header_rows(
    period: ForecastPeriod,
    daily: Sequence[DailyPeriod],
    celestial: CelestialData,
    cfg: SkywatchConfig,
) -> list[TableRow]:
    dow = day_of_week(period.start_time)
    if cfg.display.layout == Layout.DAILY:
        sun = from_daily_periods(daily, period.start_time.date())
        return [
            _celestial_row("Sunrise", sun.sunrise, dow),
            _celestial_row("Sunset", sun.sunset, dow),
        ]
    title = TableRow(
        kind=RowKind.DAY_TITLE,
        cells=(TableCell(format_day_title(period.start_time), colspan=len(COLUMNS)),),
        day_of_week=dow,
    )
    return [
        title,
        _celestial_row("Sunrise", celestial.sunrise, dow),
        _celestial_row("Sunset", celestial.sunset, dow),
        _celestial_row("Moonrise", celestial.moonrise, dow),
        _celestial_row("Moonset", celestial.moonset, dow),
    ]


def _celestial_row(label: str, at: time | None, dow: int) -> TableRow:
    return TableRow(
        kind=RowKind.CELESTIAL,
        cells=(TableCell(label), TableCell(format_clock(at), colspan=len(COLUMNS) - 1)),
        day_of_week=dow,
    )


def _forecast_row(period: ForecastPeriod, celestial: CelestialData, cfg: SkywatchConfig) -> TableRow:
    dow = day_of_week(period.start_time)
    rec = recommend(
        period.short_forecast,
        period.precipitation_probability,
        celestial.moon_illumination,
        is_daytime=period.is_daytime,
        settings=cfg.recommendation,
    )
    cells = (
        TableCell(format_datetime(period.start_time)),
        TableCell(f"{_number(period.temperature)}°{period.temperature_unit}"),
        TableCell(period.short_forecast),
        TableCell("Yes" if period.is_daytime else "No"),
        TableCell(format_precipitation(period.precipitation_probability)),
        TableCell(format_moonlight(celestial.moon_illumination)),
        TableCell(rec.verdict.value, background=rec.color),
    )
    return TableRow(
        kind=RowKind.FORECAST,
        cells=cells,
        background=day_color(dow, cfg.display.day_colors),
        day_of_week=dow,
        recommendation=rec.verdict.value,
    )


def format_datetime(moment: datetime) -> str:
    """10/19/2026, 08:00 PM"""
    return moment.strftime("%m/%d/%Y, %I:%M %p")


def format_day_title(moment: datetime) -> str:
    """Monday, Oct 19th"""
    return f"{moment.strftime('%A')}, {moment.strftime('%b')} {moment.day}{ordinal_suffix(moment.day)}"


def ordinal_suffix(n: int) -> str:
    if 3 < n < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def format_clock(at: time | None) -> str:
    """6:05 PM, or N/A"""
    if at is None:
        return "N/A"
    hour = at.hour % 12 or 12
    suffix = "AM" if at.hour < 12 else "PM"
    return f"{hour}:{at.minute:02d} {suffix}"


def format_precipitation(value: float | None) -> str:
    return "N/A" if value is None else f"{value:g}%"


def format_moonlight(fraction: float | None) -> str:
    if not fraction:
        return "Unknown"
    return f"{round(fraction * 100)}%"


def _number(value: float) -> str:
    return f"{value:g}"
