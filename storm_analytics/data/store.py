"""
DataStore — explicit cache for the decoded storm table and its aggregates.

Create one per session and pass it to the report functions. Re-loading the
same unchanged file reuses the cached table; invalidate() forces a re-read.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from storm_analytics.config import INBOX_FOLDER
from storm_analytics.data.loader import resolve_storm_file, load_storm_data, prepare_storm_data
from storm_analytics.analytics.harm import health_impact, economic_impact
from storm_analytics.analytics.timeline import decade_histogram


class DataStore:
    """Decoded storm events plus lazily computed result tables."""

    def __init__(self, inbox: Path = INBOX_FOLDER) -> None:
        self.inbox = inbox
        self.df: pd.DataFrame = pd.DataFrame()
        self.source: Optional[Path] = None
        self._mtime: Optional[float] = None
        self._loaded = False
        self._results: dict[str, pd.DataFrame] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: str | Path | None = None) -> "DataStore":
        """Load and decode a storm data file, reusing the cache when unchanged."""
        source = resolve_storm_file(path, self.inbox)
        mtime = source.stat().st_mtime

        if self._loaded and self.source == source and self._mtime == mtime:
            print(f"  Using cached storm data ({len(self.df):,} rows)")
            return self

        print("Loading storm data...")
        self._set(load_storm_data(source))
        self.source = source
        self._mtime = mtime
        return self

    def load_frame(self, raw: pd.DataFrame) -> "DataStore":
        """Use an in-memory raw table instead of reading a file."""
        self._set(prepare_storm_data(raw))
        self.source = None
        self._mtime = None
        return self

    def invalidate(self) -> None:
        """Drop the cached table and every derived result."""
        self.df = pd.DataFrame()
        self.source = None
        self._mtime = None
        self._loaded = False
        self._results.clear()

    def _set(self, df: pd.DataFrame) -> None:
        self.df = df
        self._results.clear()
        self._loaded = True

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _cached(self, key: str, fn) -> pd.DataFrame:
        if not self._loaded:
            raise RuntimeError("DataStore has no data; call load() or load_frame() first")
        if key not in self._results:
            self._results[key] = fn(self.df)
        return self._results[key].copy()

    def health(self) -> pd.DataFrame:
        """Ranked deaths + injuries per event type."""
        return self._cached("health", health_impact)

    def economic(self) -> pd.DataFrame:
        """Ranked property + crop damage per event type."""
        return self._cached("economic", economic_impact)

    def decades(self) -> pd.DataFrame:
        """Record counts per decade bucket."""
        return self._cached("decades", lambda df: decade_histogram(df["begin_date"]))

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.df)

    def event_types(self) -> list[str]:
        """Distinct event type labels, as spelled in the source."""
        if self.df.empty:
            return []
        return sorted(self.df["event_type"].dropna().unique().tolist())

    def date_range(self) -> str:
        """Human-readable date range string."""
        if self.df.empty:
            return "N/A"
        dates = self.df["begin_date"].dropna()
        if dates.empty:
            return "N/A"
        return f"{dates.min():%Y-%m-%d} to {dates.max():%Y-%m-%d}"
