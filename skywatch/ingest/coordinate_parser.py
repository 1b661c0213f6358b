"""Parse free-text "<lat>, <lon>" input into a Coordinate."""

import math
import re
from enum import StrEnum

from skywatch.models.common import Coordinate


class ValidationKind(StrEnum):
    MISSING_INPUT = "missing_input"
    BAD_FORMAT = "bad_format"
    NOT_NUMERIC = "not_numeric"


_MESSAGES = {
    ValidationKind.MISSING_INPUT: "Please enter coordinates in the format <latitude, longitude>!",
    ValidationKind.BAD_FORMAT: "Invalid format! Please use <latitude, longitude>.",
    ValidationKind.NOT_NUMERIC: "Invalid latitude or longitude! Please enter valid numbers.",
}

# ASCII decimal or exponent notation; no "_" separators, no non-ASCII digits.
_NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class ValidationError(ValueError):
    """Raised when coordinate input cannot be parsed."""

    def __init__(self, kind: ValidationKind, raw: str | None = None):
        super().__init__(_MESSAGES[kind])
        self.kind = kind
        self.raw = raw


def parse_coordinates(raw: str | None) -> Coordinate:
    """Split on comma, trim, and require exactly two finite numbers.

    Latitude and longitude ranges are not checked.
    """
    if raw is None or not raw.strip():
        raise ValidationError(ValidationKind.MISSING_INPUT, raw)

    tokens = [t.strip() for t in raw.split(",")]
    if len(tokens) != 2:
        raise ValidationError(ValidationKind.BAD_FORMAT, raw)

    latitude = _to_float(tokens[0], raw)
    longitude = _to_float(tokens[1], raw)
    return Coordinate(latitude=latitude, longitude=longitude)


def _to_float(token: str, raw: str) -> float:
    if _NUMBER_RE.fullmatch(token) is None:
        raise ValidationError(ValidationKind.NOT_NUMERIC, raw)
    try:
        value = float(token)
    except ValueError:
        raise ValidationError(ValidationKind.NOT_NUMERIC, raw) from None
    if not math.isfinite(value):
        raise ValidationError(ValidationKind.NOT_NUMERIC, raw)
    return value
