"""
Storm data file discovery and loading.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from storm_analytics.config import INBOX_FOLDER, STORM_KEYWORDS, STORM_SUFFIXES, REQUIRED_COLUMNS
from storm_analytics.data.normalize import check_columns, select_columns, decode_damage


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------

def discover_storm_files(
    inbox: Path = INBOX_FOLDER,
    keywords: list[str] | None = None,
) -> list[Path]:
    """Find storm data files (.csv or .csv.bz2) in inbox, newest first."""
    if keywords is None:
        keywords = STORM_KEYWORDS

    matches: list[Path] = []
    if not inbox.exists():
        return matches

    for f in inbox.rglob("*"):
        if not f.is_file():
            continue
        filename_lower = f.name.lower()
        if not filename_lower.endswith(STORM_SUFFIXES):
            continue
        if any(kw in filename_lower for kw in keywords):
            matches.append(f)

    matches.sort(key=lambda p: p.stat().st_mtime, reverse=True)
    return matches


def resolve_storm_file(path: str | Path | None = None, inbox: Path = INBOX_FOLDER) -> Path:
    """Return the explicit path if given, else the newest discovered file."""
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Storm data file not found: {path}")
        return path

    files = discover_storm_files(inbox)
    if not files:
        raise FileNotFoundError(
            f"No storm data file in {inbox} (expected a name containing one of {STORM_KEYWORDS})"
        )
    return files[0]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def read_storm_csv(filepath: str | Path) -> pd.DataFrame:
    """Read the raw CSV, only the columns the analysis uses.

    Compression is inferred from the suffix, so the published .csv.bz2 reads as-is.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Storm data file not found: {filepath}")

    usecols = set(REQUIRED_COLUMNS)
    df = pd.read_csv(
        filepath,
        usecols=lambda c: c in usecols,
        dtype={"EVTYPE": str, "BGN_DATE": str, "PROPDMGEXP": str, "CROPDMGEXP": str},
        keep_default_na=False,
        na_values={"FATALITIES": [""], "INJURIES": [""], "PROPDMG": [""], "CROPDMG": [""]},
        low_memory=False,
    )
    check_columns(df)
    return df


def load_storm_data(filepath: str | Path) -> pd.DataFrame:
    """Read, trim, retype and decode one storm data file."""
    print(f"  Reading {Path(filepath).name}...")
    raw = read_storm_csv(filepath)
    return prepare_storm_data(raw)


def prepare_storm_data(raw: pd.DataFrame) -> pd.DataFrame:
    """Run the in-memory stages: column selection, then damage decoding."""
    typed = select_columns(raw)

    bad_dates = int(typed["begin_date"].isna().sum())
    if bad_dates:
        print(f"  Warning: {bad_dates:,} rows have an unparseable BGN_DATE (kept with a missing date)")

    decoded = decode_damage(typed)
    print(f"  Loaded {len(decoded):,} storm events, {decoded['event_type'].nunique():,} event types")
    return decoded
