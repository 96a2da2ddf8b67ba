#!/usr/bin/env python3
"""
Storm Analytics CLI — runs the storm-event pipeline and prints or exports the results.

USAGE:
  python -m storm_analytics.cli health                      # Deaths + injuries by event type
  python -m storm_analytics.cli health --top 20 --data ./repdata_data_StormData.csv.bz2
  python -m storm_analytics.cli economic                    # Property + crop damage by event type
  python -m storm_analytics.cli timeline                    # Record counts per decade

  python -m storm_analytics.cli report                      # All of the above + Excel/JSON/PNG
  python -m storm_analytics.cli report --output ./out --all
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

from storm_analytics.config import REPORTS_FOLDER, TOP_N
from storm_analytics.data.store import DataStore
from storm_analytics.data.normalize import MissingColumnsError


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  STORM ANALYTICS — {title}")
    print("=" * 70)


def _top(args) -> int | None:
    return None if getattr(args, "all", False) else args.top


def print_health(store: DataStore, top: int | None) -> None:
    table = store.health()
    shown = table.head(top) if top else table
    print(f"\nMOST HARMFUL EVENT TYPES ({len(shown)} of {len(table)}):\n")
    print(f"{'#':<4}{'Event Type':<32}{'Deaths':>10}{'Injuries':>12}{'Total':>12}")
    for i, r in enumerate(shown.itertuples(index=False), 1):
        print(f"{i:<4}{str(r.event_type)[:30]:<32}{r.deaths_total:>10,}{r.injuries_total:>12,}{r.total_harm:>12,}")


def print_economic(store: DataStore, top: int | None) -> None:
    table = store.economic()
    shown = table.head(top) if top else table
    print(f"\nMOST COSTLY EVENT TYPES ({len(shown)} of {len(table)}):\n")
    print(f"{'#':<4}{'Event Type':<32}{'Property':>18}{'Crop':>18}{'Total':>18}")
    for i, r in enumerate(shown.itertuples(index=False), 1):
        print(f"{i:<4}{str(r.event_type)[:30]:<32}"
              f"${r.property_damage_total:>17,.0f}${r.crop_damage_total:>17,.0f}${r.total_cost:>17,.0f}")


def print_timeline(store: DataStore) -> None:
    decades = store.decades()
    print("\nRECORDS BY DECADE:\n")
    for r in decades.to_dict("records"):
        print(f"  {r['label']:<8}{r['start']:%Y-%m-%d} to {r['end']:%Y-%m-%d}{r['count']:>12,}")


def cmd_health(args, store: DataStore) -> None:
    _banner("POPULATION HEALTH")
    store.load(args.data)
    print(f"  Period: {store.date_range()}")
    print_health(store, _top(args))


def cmd_economic(args, store: DataStore) -> None:
    _banner("ECONOMIC DAMAGE")
    store.load(args.data)
    print(f"  Period: {store.date_range()}")
    print_economic(store, _top(args))


def cmd_timeline(args, store: DataStore) -> None:
    _banner("TIMELINE")
    store.load(args.data)
    print_timeline(store)


def cmd_report(args, store: DataStore) -> None:
    """Print every table and write the Excel, JSON and PNG outputs."""
    _banner("FULL REPORT")
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")
    store.load(args.data)
    top = _top(args)

    print(f"\n  Period: {store.date_range()}")
    print_health(store, top)
    print_economic(store, top)
    print_timeline(store)

    if args.output:
        output_folder = Path(args.output)
    else:
        output_folder = REPORTS_FOLDER / datetime.now().strftime("%Y%m%d_%H%M%S")
    output_folder.mkdir(parents=True, exist_ok=True)
    print("\n  Writing outputs...\n")

    from storm_analytics.reports.harm_report import generate_excel, generate_json
    generate_excel(store, output_folder / "Storm_Impact_Report.xlsx", top)
    print("   Storm_Impact_Report.xlsx")

    with open(output_folder / "storm_impact.json", "w") as f:
        json.dump(generate_json(store, top), f, indent=2)
    print("   storm_impact.json")

    from storm_analytics.reports.plots import plot_decade_histogram
    plot_decade_histogram(store.decades(), output_folder / "records_by_decade.png")
    print("   records_by_decade.png")

    print(f"\n  Reports saved to: {output_folder}")
    print("=" * 70 + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storm-analytics",
        description="Storm Analytics — harm and damage of US storm events (NOAA, 1950-2011)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data", help="Storm data file (.csv or .csv.bz2); default: newest in STORM_DATA_DIR")

    ranked = argparse.ArgumentParser(add_help=False)
    ranked.add_argument("--top", type=int, default=TOP_N, help=f"Rows to show (default {TOP_N})")
    ranked.add_argument("--all", action="store_true", help="Show every event type")

    health_parser = subparsers.add_parser("health", parents=[common, ranked], help="Deaths + injuries by event type")
    health_parser.set_defaults(func=cmd_health)

    economic_parser = subparsers.add_parser("economic", parents=[common, ranked], help="Damage by event type")
    economic_parser.set_defaults(func=cmd_economic)

    timeline_parser = subparsers.add_parser("timeline", parents=[common], help="Records per decade")
    timeline_parser.set_defaults(func=cmd_timeline)

    report_parser = subparsers.add_parser("report", parents=[common, ranked], help="Full report with exports")
    report_parser.add_argument("--output", help="Output directory (default: STORM_DATA_DIR/reports/<timestamp>)")
    report_parser.set_defaults(func=cmd_report)

    return parser


def main(argv: list[str] | None = None, store: DataStore | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args, store or DataStore())
    except (FileNotFoundError, MissingColumnsError) as exc:
        print(f"\n  ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
