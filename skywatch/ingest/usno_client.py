"""US Naval Observatory one-day sun/moon data client."""

import logging
from datetime import date

import httpx

from skywatch.config.defaults import DEFAULT_USER_AGENT, USNO_BASE_URL
from skywatch.ingest.nws_client import FetchError
from skywatch.models.common import Coordinate

logger = logging.getLogger(__name__)


class UsnoClient:
    def __init__(
        self,
        base_url: str = USNO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def get_oneday(self, coord: Coordinate, on_date: date, tz_offset: float) -> dict:
        """Fetch rise/set/transit times and moon illumination for one day.

        tz_offset is hours east of UTC, already including any DST shift.
        """
        url = f"{self.base_url}/api/rstt/oneday"
        params = {
            "date": on_date.isoformat(),
            "coords": coord.as_query(),
            "tz": _format_offset(tz_offset),
            "dst": "false",
        }
        try:
            resp = httpx.get(
                url, params=params, headers={"User-Agent": self.user_agent}, timeout=self.timeout,
            )
        except httpx.RequestError as e:
            raise FetchError(f"Request failed: {e}", url=url) from e
        if not resp.is_success:
            raise FetchError(
                f"USNO returned HTTP {resp.status_code}", url=url, status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise FetchError("Invalid JSON from USNO", url=url, status_code=resp.status_code) from e


def _format_offset(hours: float) -> str:
    if float(hours).is_integer():
        return str(int(hours))
    return f"{hours:g}"
