import pandas as pd

from storm_analytics.analytics.harm import health_impact, economic_impact, rank_by_total, impact_summary
from storm_analytics.data.schemas import HEALTH_SPEC


def _events(rows):
    return pd.DataFrame(rows, columns=["event_type", "fatalities", "injuries", "property_damage", "crop_damage"])


def test_health_sums_and_orders_descending():
    events = _events([
        ("TORNADO", 1, 2, 0.0, 0.0),
        ("TORNADO", 0, 1, 0.0, 0.0),
        ("FLOOD", 5, 0, 0.0, 0.0),
    ])
    out = health_impact(events)
    assert out["event_type"].tolist() == ["FLOOD", "TORNADO"]
    assert out["total_harm"].tolist() == [5, 4]
    assert out.loc[1, "deaths_total"] == 1
    assert out.loc[1, "injuries_total"] == 3
    assert list(out.columns) == ["event_type", "deaths_total", "injuries_total", "total_harm"]


def test_zero_total_groups_are_dropped():
    events = _events([
        ("HAIL", 0, 0, 10.0, 0.0),
        ("FOG", 0, 1, 0.0, 0.0),
    ])
    assert health_impact(events)["event_type"].tolist() == ["FOG"]
    assert economic_impact(events)["event_type"].tolist() == ["HAIL"]


def test_labels_are_not_normalized():
    events = _events([
        ("TSTM WIND", 1, 0, 0.0, 0.0),
        ("THUNDERSTORM WIND", 1, 0, 0.0, 0.0),
        ("tstm wind", 1, 0, 0.0, 0.0),
        (" TSTM WIND", 1, 0, 0.0, 0.0),
    ])
    assert len(health_impact(events)) == 4


def test_ties_keep_first_occurrence_order():
    events = _events([
        ("B", 1, 0, 0.0, 0.0),
        ("A", 0, 1, 0.0, 0.0),
        ("C", 3, 0, 0.0, 0.0),
    ])
    assert health_impact(events)["event_type"].tolist() == ["C", "B", "A"]


def test_economic_totals():
    events = _events([
        ("FLOOD", 0, 0, 1e9, 5e6),
        ("HAIL", 0, 0, 3000.0, 2e7),
        ("FLOOD", 0, 0, 1e6, 0.0),
    ])
    out = economic_impact(events)
    assert out["event_type"].tolist() == ["FLOOD", "HAIL"]
    assert out.loc[0, "property_damage_total"] == 1e9 + 1e6
    assert out.loc[0, "crop_damage_total"] == 5e6
    assert out.loc[0, "total_cost"] == 1e9 + 1e6 + 5e6
    assert out.loc[1, "total_cost"] == 3000.0 + 2e7


def test_strictly_non_increasing_on_pipeline_output(store):
    for table, col in [(store.health(), "total_harm"), (store.economic(), "total_cost")]:
        assert table[col].is_monotonic_decreasing
        assert (table[col] > 0).all()


def test_totals_match_group_sums(store):
    health = store.health().set_index("event_type")
    expected = store.df.groupby("event_type")[["fatalities", "injuries"]].sum()
    for label, row in health.iterrows():
        assert row["deaths_total"] == expected.loc[label, "fatalities"]
        assert row["injuries_total"] == expected.loc[label, "injuries"]


def test_health_and_economic_are_independent(store):
    before = store.df.copy()
    health_impact(store.df)
    economic_impact(store.df)
    pd.testing.assert_frame_equal(store.df, before)


def test_empty_input_returns_empty_table():
    out = rank_by_total(_events([]), HEALTH_SPEC)
    assert out.empty
    assert list(out.columns) == HEALTH_SPEC.output_cols


def test_idempotent(store):
    pd.testing.assert_frame_equal(health_impact(store.df), health_impact(store.df))
    pd.testing.assert_frame_equal(economic_impact(store.df), economic_impact(store.df))


def test_impact_summary(store):
    s = impact_summary(store.health(), store.economic())
    assert s["total_deaths"] == 6
    assert s["total_injuries"] == 6
    assert s["top_health_event"] == "FLOOD"
    assert s["top_economic_event"] == "FLOOD"
    assert s["total_cost"] == s["total_property_damage"] + s["total_crop_damage"]
