"""
Column selection, typing, and damage magnitude decoding.
"""
from __future__ import annotations

import pandas as pd

from storm_analytics.config import (
    COLUMN_MAP, REQUIRED_COLUMNS, COUNT_COLS, DATE_FORMAT,
    MAGNITUDE_MULTIPLIERS, CONSTANT_SUFFIXES, ZERO_SUFFIXES,
)


class MissingColumnsError(ValueError):
    """Raised when the source table lacks one of the required columns."""

    def __init__(self, missing: list[str], found: list[str]) -> None:
        self.missing = missing
        self.found = found
        super().__init__(f"Storm data is missing required columns: {missing}. Found: {found}")


# ---------------------------------------------------------------------------
# Column selection
# ---------------------------------------------------------------------------

def check_columns(df: pd.DataFrame) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing, list(df.columns))


def _parse_begin_date(raw: pd.Series) -> pd.Series:
    """Parse "M/D/YYYY[ H:MM:SS]" text to dates; anything else becomes NaT.

    Columns that are already datetimes keep their date part.
    """
    if pd.api.types.is_datetime64_any_dtype(raw):
        if isinstance(raw.dtype, pd.DatetimeTZDtype):
            raw = raw.dt.tz_localize(None)
        return raw.dt.normalize().astype("datetime64[ns]")

    date_part = raw.astype(str).str.extract(r"^\s*(\d{1,2}/\d{1,2}/\d{4})", expand=False)
    return pd.to_datetime(date_part, format=DATE_FORMAT, errors="coerce").astype("datetime64[ns]")


def _suffix_code(value) -> str:
    """Suffix as text: 3 / 3.0 -> "3", missing -> "", anything else str()."""
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return ""
    if pd.api.types.is_integer(value):
        return str(int(value))
    if pd.api.types.is_float(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def select_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Keep the nine analysis columns, rename them, parse dates and counts.

    Never drops rows: unparseable dates become NaT, missing counts become 0.
    Damage suffixes become text even when the source column is numeric.
    """
    check_columns(df)
    out = df[REQUIRED_COLUMNS].rename(columns=COLUMN_MAP)

    out["begin_date"] = _parse_begin_date(out["begin_date"])

    for col in ["property_damage_suffix", "crop_damage_suffix"]:
        out[col] = out[col].map(_suffix_code).astype(object)

    for col in COUNT_COLS:
        out[col] = pd.to_numeric(out[col], errors="coerce").fillna(0).astype("int64")

    for col in ["property_damage_raw", "crop_damage_raw"]:
        out[col] = pd.to_numeric(out[col], errors="coerce")

    return out


# ---------------------------------------------------------------------------
# Magnitude decoding
# ---------------------------------------------------------------------------

def decode_magnitude(mantissa: float, suffix) -> float:
    """Convert a (value, suffix) damage pair into dollars.

    H/K/M/B scale by 10^2/10^3/10^6/10^9, a digit 1-8 is used as the
    exponent directly, "+" yields the constant 1. Blank, "?", "-", "0" and
    any other code decode to 0. Suffixes are case-insensitive.
    """
    code = _suffix_code(suffix).upper()

    if code in CONSTANT_SUFFIXES:
        return CONSTANT_SUFFIXES[code]

    multiplier = MAGNITUDE_MULTIPLIERS.get(code)
    if multiplier is None or mantissa is None or pd.isna(mantissa):
        return 0.0
    return float(mantissa) * multiplier


def decode_magnitudes(mantissa: pd.Series, suffix: pd.Series) -> pd.Series:
    """Vectorized decode_magnitude: same rule, one pass over the columns."""
    codes = suffix.map(_suffix_code).astype(str).str.upper()
    multiplier = codes.map(MAGNITUDE_MULTIPLIERS).astype("float64")
    values = pd.to_numeric(mantissa, errors="coerce").astype("float64") * multiplier

    constant = codes.map(CONSTANT_SUFFIXES).astype("float64")
    values = constant.where(constant.notna(), values)
    return values.fillna(0.0).rename(None)


def decode_damage(df: pd.DataFrame) -> pd.DataFrame:
    """Replace the raw/suffix damage pairs with decoded dollar columns."""
    out = df.copy()
    out["property_damage"] = decode_magnitudes(out["property_damage_raw"], out["property_damage_suffix"])
    out["crop_damage"] = decode_magnitudes(out["crop_damage_raw"], out["crop_damage_suffix"])

    unknown = _unknown_suffix_count(out["property_damage_suffix"]) + _unknown_suffix_count(out["crop_damage_suffix"])
    if unknown:
        print(f"  Warning: {unknown:,} damage values have an unrecognized suffix (decoded as 0)")

    drop_cols = [
        "property_damage_raw", "property_damage_suffix",
        "crop_damage_raw", "crop_damage_suffix",
    ]
    return out.drop(columns=drop_cols)


def _unknown_suffix_count(suffix: pd.Series) -> int:
    """Suffixes outside every documented code."""
    codes = suffix.map(_suffix_code).astype(str).str.upper()
    known = set(MAGNITUDE_MULTIPLIERS) | set(CONSTANT_SUFFIXES) | ZERO_SUFFIXES
    return int((~codes.isin(known)).sum())
