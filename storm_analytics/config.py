"""
Storm Analytics — Configuration: paths, constants, column contract.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with STORM_DATA_DIR env var
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("STORM_DATA_DIR", str(Path.cwd() / "data")))
INBOX_FOLDER = _data_dir
REPORTS_FOLDER = _data_dir / "reports"

# ---------------------------------------------------------------------------
# File-discovery patterns (keywords matched case-insensitively in filename)
# ---------------------------------------------------------------------------
STORM_KEYWORDS = ["stormdata", "storm_data", "storm data"]
STORM_SUFFIXES = (".csv", ".csv.bz2")

# ---------------------------------------------------------------------------
# Column mapping from raw NOAA CSV → internal names
# ---------------------------------------------------------------------------
COLUMN_MAP = {
    "REFNUM": "refnum",
    "EVTYPE": "event_type",
    "BGN_DATE": "begin_date",
    "FATALITIES": "fatalities",
    "INJURIES": "injuries",
    "PROPDMG": "property_damage_raw",
    "PROPDMGEXP": "property_damage_suffix",
    "CROPDMG": "crop_damage_raw",
    "CROPDMGEXP": "crop_damage_suffix",
}

REQUIRED_COLUMNS = list(COLUMN_MAP.keys())

COUNT_COLS = ["fatalities", "injuries"]

# BGN_DATE looks like "4/18/1950 0:00:00"; only the date part is parsed
DATE_FORMAT = "%m/%d/%Y"

# ---------------------------------------------------------------------------
# Damage magnitude suffixes
# Digits 1-8 are read as the power-of-ten exponent itself. NOAA never
# documented these codes; the alternative reading (every digit = x10) gives
# implausibly small totals for the affected rows. This is a judgment call.
# ---------------------------------------------------------------------------
MAGNITUDE_MULTIPLIERS = {
    "H": 1e2,
    "K": 1e3,
    "M": 1e6,
    "B": 1e9,
    **{str(d): 10.0 ** d for d in range(1, 9)},
}

# "+" decodes to the literal value 1, whatever the mantissa
CONSTANT_SUFFIXES = {"+": 1.0}

# Documented "no value" codes; they decode to 0 without a warning
ZERO_SUFFIXES = {"", "0", "?", "-"}

# ---------------------------------------------------------------------------
# Timeline histogram
# ---------------------------------------------------------------------------
DECADE_BREAKS = [f"{year}-01-01" for year in range(1950, 2020, 10)]

# ---------------------------------------------------------------------------
# Report defaults
# ---------------------------------------------------------------------------
TOP_N = 10
