"""Night-sky forecast dashboard: FastAPI app serving a form, an HTML table, and JSON."""

import html
import os

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from skywatch.config.loader import load_config
from skywatch.models.table import ForecastReport
from skywatch.pipeline.forecast_pipeline import ForecastPipeline
from skywatch.reporting.formatters import format_table_html, report_to_dict

CONFIG_PATH = os.environ.get("SKYWATCH_CONFIG")

app = FastAPI(title="Skywatch", version="0.1.0")

_STYLE = """
body { font-family: sans-serif; margin: 2rem; }
table.forecast { border-collapse: collapse; }
table.forecast td, table.forecast th { border: 1px solid #ccc; padding: 4px 8px; }
tr.title-row td { font-weight: bold; background: #333; color: #fff; }
tr.sunrise-sunset-row td { font-style: italic; }
.error { color: #c0392b; }
.notice { color: #7f8c8d; }
"""


def _pipeline() -> ForecastPipeline:
    return ForecastPipeline(load_config(CONFIG_PATH))


def _page(coordinates: str = "", content: str = "") -> str:
    return (
        "<!DOCTYPE html>\n<html><head><meta charset=\"utf-8\"><title>Skywatch</title>"
        f"<style>{_STYLE}</style></head><body>\n"
        "<h1>Skywatch</h1>\n"
        '<form action="/forecast" method="get">'
        '<input id="coordinates" name="coordinates" placeholder="latitude, longitude" '
        f'value="{html.escape(coordinates)}"> <button type="submit">Get forecast</button>'
        "</form>\n"
        f'<div id="forecast-container">{content}</div>\n'
        "</body></html>"
    )


def _status(report: ForecastReport) -> int:
    if report.ok:
        return 200
    return 502 if report.error_kind == "fetch_error" else 400


def render_report_page(report: ForecastReport) -> str:
    if not report.ok:
        return _page(report.raw_input, f'<p class="error">{html.escape(report.error or "")}</p>')
    notices = "".join(
        f'<p class="notice">{html.escape(n.source)} unavailable: {html.escape(n.reason)}</p>'
        for n in report.notices
    )
    return _page(report.raw_input, notices + format_table_html(report.table))


@app.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(_page())


@app.get("/forecast", response_class=HTMLResponse)
def forecast_page(coordinates: str = ""):
    report = _pipeline().run(coordinates)
    return HTMLResponse(render_report_page(report), status_code=_status(report))


@app.get("/api/forecast")
def forecast_json(coordinates: str = ""):
    """Forecast table as JSON; 400 on bad input, 502 when NWS fails."""
    report = _pipeline().run(coordinates)
    if not report.ok:
        raise HTTPException(_status(report), detail={"error": report.error, "error_kind": report.error_kind})
    return report_to_dict(report)
