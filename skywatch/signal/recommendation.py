"""Night-sky recommendation from weather text, precipitation and moonlight."""

from dataclasses import dataclass
from enum import StrEnum

from skywatch.config.schema import RecommendationConfig


class Verdict(StrEnum):
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"


@dataclass(frozen=True)
class Recommendation:
    verdict: Verdict
    color: str
    moonlit: bool = False


def recommend(
    description: str,
    precipitation: float | None,
    moonlight: float | None,
    is_daytime: bool = False,
    settings: RecommendationConfig | None = None,
) -> Recommendation:
    """Rules, first match wins for the color:

    1. moonlight above threshold: alert color (verdict still from the weather rules)
    2. "sunny"/"cloudy" in the description, or precipitation above threshold: no
    3. "clear" in the description: yes
    4. otherwise: maybe

    Missing precipitation or moonlight counts as zero.
    """
    s = settings or RecommendationConfig()
    verdict, color = weather_verdict(description, precipitation, s)

    moonlit = (moonlight or 0.0) > s.moonlight_threshold
    if moonlit or (is_daytime and s.daytime_is_alert):
        color = s.alert_color
    return Recommendation(verdict=verdict, color=color, moonlit=moonlit)


def weather_verdict(
    description: str,
    precipitation: float | None,
    settings: RecommendationConfig | None = None,
) -> tuple[Verdict, str]:
    s = settings or RecommendationConfig()
    text = description.lower()
    if "sunny" in text or "cloudy" in text or (precipitation or 0) > s.precipitation_threshold:
        return Verdict.NO, s.alert_color
    if "clear" in text:
        return Verdict.YES, s.positive_color
    return Verdict.MAYBE, s.neutral_color
