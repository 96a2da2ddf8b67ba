"""
Harm analytics — per event type health and economic totals, ranked.
"""
from __future__ import annotations

import pandas as pd

from storm_analytics.data.schemas import ImpactSpec, HEALTH_SPEC, ECONOMIC_SPEC


def rank_by_total(events: pd.DataFrame, spec: ImpactSpec) -> pd.DataFrame:
    """Sum the spec's measures per exact event_type label and rank descending.

    Labels are grouped as-is ("TSTM WIND" and "THUNDERSTORM WIND" stay apart).
    Groups whose total is zero are dropped. Ties keep first-occurrence order.
    """
    if events.empty:
        return pd.DataFrame(columns=spec.output_cols)

    g = events.groupby("event_type", sort=False, dropna=False).agg(
        **{out: (src, "sum") for src, out in spec.measures}
    )
    g[spec.total_col] = g[[out for _, out in spec.measures]].sum(axis=1)

    g = g[g[spec.total_col] > 0]
    g = g.sort_values(spec.total_col, ascending=False, kind="stable")
    return g.reset_index()[spec.output_cols]


def health_impact(events: pd.DataFrame) -> pd.DataFrame:
    """Deaths + injuries per event type."""
    return rank_by_total(events, HEALTH_SPEC)


def economic_impact(events: pd.DataFrame) -> pd.DataFrame:
    """Property + crop damage (dollars) per event type."""
    return rank_by_total(events, ECONOMIC_SPEC)


def impact_summary(health: pd.DataFrame, economic: pd.DataFrame) -> dict:
    """Headline KPIs over both ranked tables."""
    return {
        "total_deaths": int(health["deaths_total"].sum()) if not health.empty else 0,
        "total_injuries": int(health["injuries_total"].sum()) if not health.empty else 0,
        "total_property_damage": float(economic["property_damage_total"].sum()) if not economic.empty else 0.0,
        "total_crop_damage": float(economic["crop_damage_total"].sum()) if not economic.empty else 0.0,
        "total_cost": float(economic["total_cost"].sum()) if not economic.empty else 0.0,
        "harmful_event_types": int(len(health)),
        "costly_event_types": int(len(economic)),
        "top_health_event": _top_label(health),
        "top_economic_event": _top_label(economic),
    }


def _top_label(table: pd.DataFrame):
    """First event_type of a ranked table; None when empty or the label is missing."""
    if table.empty or pd.isna(table["event_type"].iloc[0]):
        return None
    return table["event_type"].iloc[0]
