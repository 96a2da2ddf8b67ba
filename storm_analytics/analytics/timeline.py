"""
Record counts by decade, for judging how complete the early years are.
"""
from __future__ import annotations

import pandas as pd

from storm_analytics.config import DECADE_BREAKS


def decade_breaks(dates: pd.Series) -> list[pd.Timestamp]:
    """Decade boundaries plus the latest begin_date as the closing edge."""
    breaks = [pd.Timestamp(b) for b in DECADE_BREAKS]
    latest = dates.max()
    if pd.notna(latest) and latest > breaks[-1]:
        breaks.append(pd.Timestamp(latest))
    return breaks


def decade_histogram(dates: pd.Series) -> pd.DataFrame:
    """Count records per decade bucket.

    Buckets are right-closed (the first one also includes its lower edge).
    Missing dates and dates outside the breaks are not counted.
    """
    dates = pd.to_datetime(dates, errors="coerce")
    breaks = decade_breaks(dates)

    buckets = pd.cut(dates, bins=breaks, right=True, include_lowest=True)
    counts = buckets.value_counts().reindex(buckets.cat.categories, fill_value=0)

    rows = [
        {"label": f"{start.year}s", "start": start, "end": end, "count": int(n)}
        for start, end, n in zip(breaks[:-1], breaks[1:], counts.to_numpy())
    ]
    return pd.DataFrame(rows, columns=["label", "start", "end", "count"])
