"""Default endpoints and palettes."""

NWS_BASE_URL = "https://api.weather.gov"
USNO_BASE_URL = "https://aa.usno.navy.mil"
DEFAULT_USER_AGENT = "skywatch/0.1.0"

ALERT_COLOR = "#e74c3c"
POSITIVE_COLOR = "#2ecc71"
NEUTRAL_COLOR = "#f3c612"

# Indexed by day-of-week, 0 = Sunday.
DEFAULT_DAY_COLORS: list[str] = [
    "#fef9f9",  # Sunday
    "#f6fdf6",  # Monday
    "#fefde5",  # Tuesday
    "#f8f2fc",  # Wednesday
    "#e7f2fd",  # Thursday
    "#e7fcf9",  # Friday
    "#f9f4fc",  # Saturday
]
