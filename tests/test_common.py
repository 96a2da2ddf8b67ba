import numpy as np
import pandas as pd

from storm_analytics.analytics.common import safe_divide, with_share, sanitize_for_json


def test_safe_divide():
    assert safe_divide(1, 4) == 0.25
    assert safe_divide(1, 0) == 0.0
    assert safe_divide(1, float("nan"), default=-1) == -1


def test_with_share_does_not_mutate():
    table = pd.DataFrame({"event_type": ["A", "B"], "total": [3, 1]})
    out = with_share(table, "total")
    assert out["pct_of_total"].tolist() == [75.0, 25.0]
    assert "pct_of_total" not in table.columns


def test_sanitize_for_json():
    data = {
        "n": np.int64(3),
        "x": np.float64("nan"),
        "when": pd.Timestamp("1950-04-18"),
        "missing": pd.NaT,
        "rows": pd.DataFrame({"a": [np.int64(1)]}),
    }
    assert sanitize_for_json(data) == {
        "n": 3, "x": 0.0, "when": "1950-04-18", "missing": None, "rows": [{"a": 1}],
    }
