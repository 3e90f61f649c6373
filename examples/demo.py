"""Demo script for tasktime."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tasktime.adapters.csv_adapter import parse
from tasktime.durations import calculate_duration
from tasktime.report import build_daily_report


def main() -> None:
    records = parse("examples/sample_day.csv")
    now = datetime.fromisoformat("2024-01-15T17:45:00")
    for record in records:
        print(f"{record.start_time}  {record.category_name:<12} {record.task_name:<16} {calculate_duration(records, record, now=now)}")

    report = build_daily_report(records, "2024-01-15", now=now)
    print(f"\n{report.title}: {report.total_time} ({report.status_text})")
    for category in report.categories:
        print(f"  {category.name}: {category.total_time} ({category.percentage:.0f}%)")
        for summary in category.task_summaries:
            print(f"    {summary.name} {summary.count}x {summary.rounded_time} ({summary.total_time})")


if __name__ == "__main__":
    main()
