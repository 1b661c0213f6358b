"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from skywatch.config.schema import DisplayConfig, NwsConfig, RecommendationConfig


class TestDisplayConfig:
    def test_default_palette_has_seven_days(self):
        assert len(DisplayConfig().day_colors) == 7

    @pytest.mark.parametrize("count", [0, 6, 8])
    def test_palette_must_have_seven(self, count: int):
        with pytest.raises(ValidationError):
            DisplayConfig(day_colors=["#fff"] * count)

    def test_bad_layout(self):
        with pytest.raises(ValidationError):
            DisplayConfig(layout="sideways")


class TestRecommendationConfig:
    def test_threshold_bounds(self):
        with pytest.raises(ValidationError):
            RecommendationConfig(moonlight_threshold=1.5)
        with pytest.raises(ValidationError):
            RecommendationConfig(precipitation_threshold=-1)


class TestNwsConfig:
    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            NwsConfig(timeout=0)

    def test_extra_forbidden(self):
        with pytest.raises(ValidationError):
            NwsConfig(api_key="secret")
