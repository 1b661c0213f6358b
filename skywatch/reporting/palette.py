"""Day-of-week background colors."""

from datetime import datetime

from skywatch.config.defaults import DEFAULT_DAY_COLORS


def day_of_week(moment: datetime) -> int:
    """0 = Sunday ... 6 = Saturday, in the timestamp's own offset."""
    return (moment.weekday() + 1) % 7


def day_color(dow: int, palette: list[str] | None = None) -> str:
    colors = palette or DEFAULT_DAY_COLORS
    if not 0 <= dow <= 6:
        raise ValueError(f"day of week must be 0-6, got {dow}")
    return colors[dow]
