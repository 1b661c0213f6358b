"""Tests for day-of-week helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from skywatch.config.defaults import DEFAULT_DAY_COLORS
from skywatch.reporting.palette import day_color, day_of_week


class TestDayColor:
    def test_total_on_week(self):
        colors = [day_color(d) for d in range(7)]
        assert colors == DEFAULT_DAY_COLORS

    def test_stable(self):
        for d in range(7):
            assert day_color(d) == day_color(d)

    @pytest.mark.parametrize("dow", [-1, 7, 42])
    def test_out_of_range(self, dow: int):
        with pytest.raises(ValueError):
            day_color(dow)

    def test_custom_palette(self):
        palette = [f"#00000{i}" for i in range(7)]
        assert day_color(3, palette) == "#000003"


class TestDayOfWeek:
    def test_sunday_is_zero(self):
        assert day_of_week(datetime(2026, 10, 18, 12)) == 0
        assert day_of_week(datetime(2026, 10, 24, 12)) == 6

    def test_uses_own_offset(self):
        # 23:30 Sunday in Denver is already Monday in UTC.
        moment = datetime(2026, 10, 18, 23, 30, tzinfo=timezone(timedelta(hours=-6)))
        assert day_of_week(moment) == 0
