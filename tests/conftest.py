import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pandas as pd
import pytest

from storm_analytics.data.store import DataStore


RAW_ROWS = [
    # REFNUM, EVTYPE, BGN_DATE, FATALITIES, INJURIES, PROPDMG, PROPDMGEXP, CROPDMG, CROPDMGEXP
    (1, "TORNADO", "4/18/1950 0:00:00", 1, 2, 25.0, "K", 0.0, ""),
    (2, "TORNADO", "11/15/1955 0:00:00", 0, 1, 2.5, "M", 0.0, ""),
    (3, "FLOOD", "6/3/1993 0:00:00", 5, 0, 10.0, "B", 5.0, "M"),
    (4, "HAIL", "5/1/2001 0:00:00", 0, 0, 3.0, "3", 0.0, "?"),
    (5, "TSTM WIND", "7/4/2005 0:00:00", 0, 0, 0.0, "", 0.0, ""),
    (6, "Tornado", "bad date", 0, 3, 1.0, "+", 2.0, "k"),
    (7, "HAIL", "11/30/2011 0:00:00", 0, 0, 7.0, "-", 1.0, "h"),
]

RAW_COLUMNS = [
    "REFNUM", "EVTYPE", "BGN_DATE", "FATALITIES", "INJURIES",
    "PROPDMG", "PROPDMGEXP", "CROPDMG", "CROPDMGEXP",
]


@pytest.fixture
def raw_df():
    """Raw storm table with an extra column the loader must drop."""
    df = pd.DataFrame(RAW_ROWS, columns=RAW_COLUMNS)
    df["STATE"] = "AL"
    return df


@pytest.fixture
def storm_csv(tmp_path, raw_df):
    path = tmp_path / "repdata_data_StormData.csv"
    raw_df.to_csv(path, index=False)
    return path


@pytest.fixture
def storm_bz2(tmp_path, raw_df):
    path = tmp_path / "repdata_data_StormData.csv.bz2"
    raw_df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def store(raw_df, tmp_path):
    return DataStore(inbox=tmp_path).load_frame(raw_df)
