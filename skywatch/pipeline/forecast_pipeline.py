"""Forecast pipeline: parse, fetch, render. Returns a report instead of raising."""

import logging
import time
from datetime import datetime

from skywatch.config.schema import SkywatchConfig
from skywatch.ingest.celestial_fetcher import CelestialFetcher
from skywatch.ingest.coordinate_parser import ValidationError, parse_coordinates
from skywatch.ingest.forecast_fetcher import ForecastFetcher
from skywatch.ingest.nws_client import FetchError, NwsClient
from skywatch.ingest.usno_client import UsnoClient
from skywatch.models.table import FallbackApplied, ForecastReport
from skywatch.reporting.renderer import render_forecast

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        config: SkywatchConfig | None = None,
        forecast_fetcher: ForecastFetcher | None = None,
        celestial_fetcher: CelestialFetcher | None = None,
    ):
        self.config = config or SkywatchConfig()
        nws = self.config.nws
        self.forecast_fetcher = forecast_fetcher or ForecastFetcher(
            NwsClient(
                base_url=nws.base_url,
                user_agent=nws.user_agent,
                timeout=nws.timeout,
                max_retries=nws.max_retries,
                retry_base_delay=nws.retry_base_delay,
            )
        )
        self.celestial_fetcher = celestial_fetcher or CelestialFetcher(
            UsnoClient(
                base_url=self.config.usno.base_url,
                user_agent=nws.user_agent,
                timeout=self.config.usno.timeout,
            )
        )

    def run(self, raw_input: str | None, now: datetime | None = None) -> ForecastReport:
        """Run one forecast for a "<lat>, <lon>" string.

        Validation and weather fetch failures end the run with an error and
        no table. Celestial failures only add a notice.
        """
        start_time = time.monotonic()
        report = ForecastReport(raw_input=raw_input or "")

        # 1. PARSE
        try:
            coord = parse_coordinates(raw_input)
        except ValidationError as e:
            logger.info("Rejected input %r: %s", raw_input, e)
            report.error = str(e)
            report.error_kind = e.kind.value
            return report
        report.coordinate = coord

        # 2. FORECASTS
        try:
            bundle = self.forecast_fetcher.fetch(coord)
        except FetchError as e:
            logger.error("Forecast fetch failed for %s: %s", coord.as_query(), e)
            report.error = f"Error fetching data: {e}"
            report.error_kind = "fetch_error"
            return report

        # 3. CELESTIAL
        celestial = self.celestial_fetcher.fetch(coord, bundle.grid.time_zone, now=now)
        if celestial.fallback:
            report.notices.append(
                FallbackApplied(source="usno", reason=celestial.fallback_reason or "unavailable")
            )

        # 4. RENDER
        report.table = render_forecast(bundle.hourly, bundle.daily, celestial, self.config)
        logger.info(
            "Rendered %d rows for %s in %.2fs",
            len(report.table.rows), coord.as_query(), time.monotonic() - start_time,
        )
        return report
