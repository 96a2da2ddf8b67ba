"""
Storm Harm Report — health and economic impact by event type, plus the decade timeline.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from storm_analytics.config import TOP_N
from storm_analytics.data.store import DataStore
from storm_analytics.data.schemas import HEALTH_SPEC, ECONOMIC_SPEC
from storm_analytics.analytics.common import sanitize_for_json, with_share
from storm_analytics.analytics.harm import impact_summary
from storm_analytics.excel.writer import ExcelWriter
from storm_analytics.reports.models import StormReport


HEALTH_COLS = [
    ("rank", "text", "Rank"),
    ("event_type", "text", "Event Type"),
    ("deaths_total", "number", "Deaths"),
    ("injuries_total", "number", "Injuries"),
    ("total_harm", "number", "Total Harm"),
    ("pct_of_total", "percent", "% of Total"),
]

ECONOMIC_COLS = [
    ("rank", "text", "Rank"),
    ("event_type", "text", "Event Type"),
    ("property_damage_total", "currency", "Property Damage"),
    ("crop_damage_total", "currency", "Crop Damage"),
    ("total_cost", "currency", "Total Cost"),
    ("pct_of_total", "percent", "% of Total"),
]

DECADE_COLS = [
    ("label", "text", "Decade"),
    ("start", "date", "From"),
    ("end", "date", "To"),
    ("count", "number", "Records"),
]

DECODING_NOTE = (
    "Damage suffixes H/K/M/B scale by hundreds/thousands/millions/billions. "
    "Numeric suffixes 1-8 are read as the power-of-ten exponent (a judgment call: "
    "reading them as a flat x10 gives implausibly small totals). '+' counts as $1; "
    "blank, '?', '-' and '0' count as $0."
)


def _ranked(table: pd.DataFrame, total_col: str, top: int | None) -> pd.DataFrame:
    """Percent-of-total over the full table, then rank and truncate."""
    out = with_share(table, total_col)
    out["event_type"] = out["event_type"].astype(object).where(out["event_type"].notna(), None)
    out.insert(0, "rank", range(1, len(out) + 1))
    return out.head(top) if top else out


def _label(event_type) -> str:
    """KPI text for a top event type; missing labels show as N/A."""
    return "N/A" if event_type is None or pd.isna(event_type) else str(event_type)


def generate_json(store: DataStore, top: int | None = TOP_N) -> dict:
    health = store.health()
    economic = store.economic()

    report = StormReport(
        source=str(store.source) if store.source else None,
        date_range=store.date_range(),
        events=store.row_count(),
        event_types=len(store.event_types()),
        summary=sanitize_for_json(impact_summary(health, economic)),
        health=sanitize_for_json(_ranked(health, "total_harm", top)),
        economic=sanitize_for_json(_ranked(economic, "total_cost", top)),
        decades=sanitize_for_json(store.decades()),
    )
    return report.model_dump(mode="json")


def generate_excel(
    store: DataStore,
    output_path: str | Path,
    top: int | None = TOP_N,
) -> Path:
    health = store.health()
    economic = store.economic()
    s = impact_summary(health, economic)
    ew = ExcelWriter()

    # Summary
    ws = ew.add_sheet("Summary")
    ew.write_title(ws, "US STORM EVENTS",
                   f"Health & Economic Impact  |  {store.date_range()}  |  Generated {pd.Timestamp.now():%B %d, %Y}")

    row = ew.write_section(ws, 5, "POPULATION HEALTH")
    row = ew.write_kpi_row(ws, row, [
        (s["total_deaths"], "DEATHS", "number"),
        (s["total_injuries"], "INJURIES", "number"),
        (_label(s["top_health_event"]), "MOST HARMFUL", "text"),
    ])

    row = ew.write_section(ws, row, "ECONOMIC DAMAGE")
    row = ew.write_kpi_row(ws, row, [
        (s["total_property_damage"], "PROPERTY DAMAGE", "currency"),
        (s["total_crop_damage"], "CROP DAMAGE", "currency"),
        (_label(s["top_economic_event"]), "MOST COSTLY", "text"),
    ])

    row = ew.write_section(ws, row, "DATA")
    row = ew.write_kpi_row(ws, row, [
        (store.row_count(), "EVENT RECORDS", "number"),
        (len(store.event_types()), "EVENT TYPE LABELS", "number"),
    ])
    ew.write_note(ws, row, DECODING_NOTE)

    ws_h = ew.add_sheet(HEALTH_SPEC.title)
    ew.write_table(ws_h, 1, HEALTH_COLS, _ranked(health, "total_harm", top), show_total=True,
                   highlight_fn=lambda i, _: "gold" if i == 0 else None)

    ws_e = ew.add_sheet(ECONOMIC_SPEC.title)
    ew.write_table(ws_e, 1, ECONOMIC_COLS, _ranked(economic, "total_cost", top), show_total=True,
                   highlight_fn=lambda i, _: "gold" if i == 0 else None)

    ws_t = ew.add_sheet("Timeline")
    ew.write_table(ws_t, 1, DECADE_COLS, store.decades(), show_total=True)

    return ew.save(output_path)
