"""
Impact table definitions: which columns are summed and how the total is named.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImpactSpec:
    """Describes one per-event-type aggregate table."""
    measures: tuple[tuple[str, str], ...]   # (source column, summed column)
    total_col: str
    title: str                              # Excel sheet name

    @property
    def output_cols(self) -> list[str]:
        return ["event_type"] + [out for _, out in self.measures] + [self.total_col]


HEALTH_SPEC = ImpactSpec(
    measures=(("fatalities", "deaths_total"), ("injuries", "injuries_total")),
    total_col="total_harm",
    title="Health Impact",
)

ECONOMIC_SPEC = ImpactSpec(
    measures=(("property_damage", "property_damage_total"), ("crop_damage", "crop_damage_total")),
    total_col="total_cost",
    title="Economic Impact",
)
