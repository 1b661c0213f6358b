"""Presentation adapters: turn a ForecastTable or ForecastReport into text, JSON or HTML."""

import html
import json

from skywatch.models.table import ForecastReport, ForecastTable, RowKind, TableRow


def format_table_text(t: ForecastTable) -> str:
    """Plain text table for terminals."""
    forecast_rows = t.rows_of(RowKind.FORECAST)
    widths = [len(c) for c in t.columns]
    for row in forecast_rows:
        for i, cell in enumerate(row.cells):
            widths[i] = max(widths[i], len(cell.text))

    def line(values: list[str]) -> str:
        return " | ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    lines = [line(list(t.columns)), "-+-".join("-" * w for w in widths)]
    for row in t.rows:
        if row.kind == RowKind.DAY_TITLE:
            lines.append(f"=== {row.cells[0].text} ===")
        elif row.kind == RowKind.CELESTIAL:
            lines.append(f"  {row.cells[0].text}: {row.cells[1].text}")
        else:
            lines.append(line([c.text for c in row.cells]))
    return "\n".join(lines)


def table_to_dict(t: ForecastTable) -> dict:
    return {
        "columns": list(t.columns),
        "rows": [_row_to_dict(r) for r in t.rows],
    }


def format_table_json(t: ForecastTable) -> str:
    """JSON table for programmatic consumption."""
    return json.dumps(table_to_dict(t), indent=2, ensure_ascii=False)


def report_to_dict(r: ForecastReport) -> dict:
    data: dict = {
        "input": r.raw_input,
        "ok": r.ok,
        "coordinate": (
            {"latitude": r.coordinate.latitude, "longitude": r.coordinate.longitude}
            if r.coordinate is not None
            else None
        ),
        "error": r.error,
        "error_kind": r.error_kind,
        "notices": [{"source": n.source, "reason": n.reason} for n in r.notices],
        "table": table_to_dict(r.table) if r.table is not None else None,
    }
    return data


def format_report_json(r: ForecastReport) -> str:
    return json.dumps(report_to_dict(r), indent=2, ensure_ascii=False)


def format_table_html(t: ForecastTable) -> str:
    """HTML <table> markup; every cell value is escaped."""
    head = "".join(f"<th>{html.escape(c)}</th>" for c in t.columns)
    body = "\n".join(_row_to_html(r) for r in t.rows)
    return (
        '<table class="forecast">\n'
        f"<thead><tr>{head}</tr></thead>\n"
        f"<tbody>\n{body}\n</tbody>\n"
        "</table>"
    )


def _row_to_html(row: TableRow) -> str:
    css_class = {
        RowKind.DAY_TITLE: "title-row",
        RowKind.CELESTIAL: "sunrise-sunset-row",
        RowKind.FORECAST: "day",
    }[row.kind]
    style = f' style="background-color: {html.escape(row.background)};"' if row.background else ""
    cells = []
    for cell in row.cells:
        attrs = f' colspan="{cell.colspan}"' if cell.colspan > 1 else ""
        if cell.background:
            attrs += f' style="background-color: {html.escape(cell.background)};"'
        cells.append(f"<td{attrs}>{html.escape(cell.text)}</td>")
    return f'<tr class="{css_class}"{style}>{"".join(cells)}</tr>'


def _row_to_dict(row: TableRow) -> dict:
    return {
        "kind": row.kind.value,
        "background": row.background,
        "day_of_week": row.day_of_week,
        "recommendation": row.recommendation,
        "cells": [
            {"text": c.text, "colspan": c.colspan, "background": c.background}
            for c in row.cells
        ],
    }
