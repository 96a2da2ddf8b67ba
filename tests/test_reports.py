import json
import math

from openpyxl import load_workbook

from storm_analytics.data.store import DataStore
from storm_analytics.reports.harm_report import generate_json, generate_excel
from storm_analytics.reports.plots import plot_decade_histogram


def test_generate_json_shape(store):
    data = generate_json(store, top=2)
    json.dumps(data)

    assert data["events"] == 7
    assert data["event_types"] == 5
    assert [r["event_type"] for r in data["health"]] == ["FLOOD", "TORNADO"]
    assert [r["rank"] for r in data["health"]] == [1, 2]
    assert data["economic"][0]["event_type"] == "FLOOD"
    assert data["decades"][0] == {"label": "1950s", "start": "1950-01-01", "end": "1960-01-01", "count": 2}
    assert data["summary"]["total_deaths"] == 6


def test_generate_json_share_uses_full_table(store):
    data = generate_json(store, top=1)
    # FLOOD 5 of 12 total harm (5 + 4 + 3)
    assert data["health"][0]["pct_of_total"] == round(5 / 12 * 100, 2)


def test_generate_json_all_rows(store):
    data = generate_json(store, top=None)
    assert len(data["health"]) == 3
    assert len(data["economic"]) == 4


def test_generate_excel_sheets(store, tmp_path):
    path = generate_excel(store, tmp_path / "out" / "report.xlsx", top=None)
    wb = load_workbook(path)
    assert wb.sheetnames == ["Summary", "Health Impact", "Economic Impact", "Timeline"]

    ws = wb["Health Impact"]
    assert ws.cell(row=1, column=2).value == "Event Type"
    assert ws.cell(row=2, column=2).value == "FLOOD"
    assert ws.cell(row=2, column=5).value == 5
    assert ws.cell(row=5, column=1).value == "TOTAL"
    assert ws.cell(row=5, column=5).value == 12

    ws = wb["Economic Impact"]
    assert ws.cell(row=2, column=5).value == 1e10 + 5e6


def test_plot_decade_histogram(store, tmp_path):
    fig, ax, saved = plot_decade_histogram(store.decades(), tmp_path / "plots" / "decades.png")
    assert saved.exists()
    assert len(ax.patches) == 7


def test_missing_top_label_reported_as_na(raw_df, tmp_path):
    raw_df.loc[raw_df["EVTYPE"] == "FLOOD", "EVTYPE"] = None
    store = DataStore(inbox=tmp_path).load_frame(raw_df)

    data = generate_json(store, top=None)
    assert data["summary"]["top_health_event"] is None
    assert data["summary"]["top_economic_event"] is None
    assert data["health"][0]["event_type"] is None

    wb = load_workbook(generate_excel(store, tmp_path / "report.xlsx"))
    values = [c.value for row in wb["Summary"].iter_rows() for c in row]
    assert values.count("N/A") == 2
    assert not any(isinstance(v, float) and math.isnan(v) for v in values)
