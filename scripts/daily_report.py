"""Print the daily report for a CSV/JSON task record file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tasktime.adapters import csv_adapter, json_adapter
from tasktime.date_utils import parse_ymd, to_ymd_local
from tasktime.report import build_daily_report, report_to_dict
from tasktime.retention import cutoff_for_retention, evict_records
from tasktime.settings import load_settings

logger = logging.getLogger("tasktime.daily_report")


def _load_records(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a daily time-tracking report")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON task records file")
    parser.add_argument("--date", help="Report date as YYYY-MM-DD (default: today)")
    parser.add_argument("--now", help="Evaluate as of this ISO timestamp (default: current time)")
    parser.add_argument("--settings", help="Path to settings JSON file")
    parser.add_argument("--target-hours", type=float, help="Daily target work hours, overrides settings")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        now = datetime.fromisoformat(args.now) if args.now else datetime.now()
        report_date = args.date or to_ymd_local(now)
        if parse_ymd(report_date) is None:
            raise ValueError(f"Invalid report date '{report_date}': expected YYYY-MM-DD")

        settings = load_settings(args.settings) if args.settings else load_settings(Path("settings.json"))
        target_hours = args.target_hours if args.target_hours is not None else settings.target_work_hours

        records = _load_records(Path(args.data))
        logger.debug("Loaded %d task records from %s", len(records), args.data)

        if settings.retention_days is not None:
            cutoff = cutoff_for_retention(settings.retention_days, today=now.date())
            records, _ = evict_records(records, cutoff, today=now.date())

        report = build_daily_report(records, report_date, target_work_hours=target_hours, now=now)
    except ValueError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    print(json.dumps(report_to_dict(report), indent=2))


if __name__ == "__main__":
    main()
