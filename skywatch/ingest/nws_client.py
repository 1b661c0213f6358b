"""NWS (api.weather.gov) client: point metadata and forecast documents."""

import logging
import time

import httpx

from skywatch.config.defaults import DEFAULT_USER_AGENT, NWS_BASE_URL
from skywatch.models.common import Coordinate

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised on non-2xx responses, network failures, or unusable bodies."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class NwsClient:
    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def point_url(self, coord: Coordinate) -> str:
        return f"{self.base_url}/points/{coord.as_query()}"

    def get_point(self, coord: Coordinate) -> dict:
        """Fetch grid metadata for a coordinate."""
        return self.get_document(self.point_url(coord))

    def get_document(self, url: str) -> dict:
        """GET a JSON document.

        Retries on 503/429 with exponential backoff when max_retries > 0.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, headers=headers, timeout=self.timeout, follow_redirects=True)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning("NWS request error, retrying in %.1fs: %s", delay, e)
                    time.sleep(delay)
                    continue
                logger.error("NWS request failed: %s -> %s", url, e)
                raise FetchError(f"Request failed: {e}", url=url) from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "NWS %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            if not resp.is_success:
                logger.error("NWS %d: %s", resp.status_code, url)
                raise FetchError(
                    f"Failed to fetch data (HTTP {resp.status_code})",
                    url=url,
                    status_code=resp.status_code,
                )
            try:
                return resp.json()
            except ValueError as e:
                raise FetchError(f"Invalid JSON from {url}", url=url, status_code=resp.status_code) from e

        raise AssertionError("unreachable")
