"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from skywatch.config.defaults import (
    ALERT_COLOR,
    DEFAULT_DAY_COLORS,
    DEFAULT_USER_AGENT,
    NEUTRAL_COLOR,
    NWS_BASE_URL,
    POSITIVE_COLOR,
    USNO_BASE_URL,
)


class Layout(StrEnum):
    USNO = "usno"    # day title + sunrise/sunset/moonrise/moonset rows
    DAILY = "daily"  # sunrise/sunset rows from the daily forecast


class GroupBy(StrEnum):
    WEEKDAY = "weekday"
    CALENDAR_DATE = "calendar_date"


class NwsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0)
    retry_base_delay: float = Field(default=5.0, ge=0.0)


class UsnoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = USNO_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)


class RecommendationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    moonlight_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    precipitation_threshold: float = Field(default=10.0, ge=0.0, le=100.0)
    alert_color: str = ALERT_COLOR
    positive_color: str = POSITIVE_COLOR
    neutral_color: str = NEUTRAL_COLOR
    daytime_is_alert: bool = False


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    layout: Layout = Layout.USNO
    group_by: GroupBy = GroupBy.WEEKDAY
    day_colors: list[str] = Field(default_factory=lambda: list(DEFAULT_DAY_COLORS))

    @field_validator("day_colors")
    @classmethod
    def _seven_colors(cls, v: list[str]) -> list[str]:
        if len(v) != 7:
            raise ValueError(f"day_colors needs one entry per weekday, got {len(v)}")
        return v


class SkywatchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    nws: NwsConfig = Field(default_factory=NwsConfig)
    usno: UsnoConfig = Field(default_factory=UsnoConfig)
    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
