import pandas as pd

from storm_analytics.analytics.timeline import decade_histogram, decade_breaks


def test_breaks_end_at_latest_date():
    dates = pd.Series(pd.to_datetime(["1951-01-01", "2011-11-30"]))
    breaks = decade_breaks(dates)
    assert breaks[0] == pd.Timestamp("1950-01-01")
    assert breaks[-2] == pd.Timestamp("2010-01-01")
    assert breaks[-1] == pd.Timestamp("2011-11-30")
    assert len(breaks) == 8


def test_latest_date_before_last_decade_is_not_appended():
    breaks = decade_breaks(pd.Series(pd.to_datetime(["1955-01-01", "2009-06-01"])))
    assert breaks[-1] == pd.Timestamp("2010-01-01")


def test_counts_per_decade(store):
    out = decade_histogram(store.df["begin_date"])
    assert out["label"].tolist() == ["1950s", "1960s", "1970s", "1980s", "1990s", "2000s", "2010s"]
    assert out["count"].tolist() == [2, 0, 0, 0, 1, 2, 1]


def test_missing_dates_are_not_counted(store):
    out = decade_histogram(store.df["begin_date"])
    assert out["count"].sum() == store.df["begin_date"].notna().sum()


def test_buckets_are_right_closed_and_include_first_edge():
    dates = pd.Series(pd.to_datetime(["1950-01-01", "1960-01-01", "1960-01-02", "2012-01-01"]))
    out = decade_histogram(dates)
    assert out["count"].tolist()[:2] == [2, 1]
    assert out["count"].iloc[-1] == 1
    assert out["end"].iloc[-1] == pd.Timestamp("2012-01-01")


def test_dates_before_first_break_are_ignored():
    dates = pd.Series(pd.to_datetime(["1949-12-31", "1950-06-01"]))
    assert decade_histogram(dates)["count"].sum() == 1
