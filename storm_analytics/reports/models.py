"""
Pydantic schemas for the exported storm report.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel


class HealthRow(BaseModel):
    rank: int
    event_type: Optional[str]
    deaths_total: int
    injuries_total: int
    total_harm: int
    pct_of_total: float


class EconomicRow(BaseModel):
    rank: int
    event_type: Optional[str]
    property_damage_total: float
    crop_damage_total: float
    total_cost: float
    pct_of_total: float


class DecadeBucket(BaseModel):
    label: str
    start: dt.date
    end: dt.date
    count: int


class ImpactSummary(BaseModel):
    total_deaths: int
    total_injuries: int
    total_property_damage: float
    total_crop_damage: float
    total_cost: float
    harmful_event_types: int
    costly_event_types: int
    top_health_event: Optional[str] = None
    top_economic_event: Optional[str] = None


class StormReport(BaseModel):
    """Frozen report snapshot written by `storm-analytics report`."""
    source: Optional[str] = None
    date_range: str
    events: int
    event_types: int
    summary: ImpactSummary
    health: list[HealthRow]
    economic: list[EconomicRow]
    decades: list[DecadeBucket]
