"""Daily report: category sections with per-task summaries and status alerts."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from tasktime.date_utils import format_date_string
from tasktime.durations import standard_task_durations
from tasktime.schema import TASK_TYPE_END, TASK_TYPE_NORMAL, TaskRecord
from tasktime.time_utils import format_duration_minutes

DEFAULT_TARGET_WORK_HOURS = 8
ROUNDING_STEP_MINUTES = 5

STATUS_NOT_FINALIZED = "Day not finalized - missing end task"
STATUS_TARGET_REACHED = "Daily target work hours reached"
STATUS_NO_ALERTS = "No status alerts"

_DURATION_STRING_PATTERN = re.compile(r"(?:(\d+)h)?\s*(?:(\d+)m)?", re.ASCII)


@dataclass
class TaskSummary:
    name: str
    count: int
    minutes: int
    total_time: str
    rounded_time: str


@dataclass
class CategorySummary:
    name: str
    task_count: int
    minutes: int
    total_time: str
    percentage: float
    task_summaries: list[TaskSummary] = field(default_factory=list)


@dataclass
class DailyReport:
    date: str
    title: str
    total_minutes: int
    total_time: str
    has_end_task: bool
    standard_task_count: int
    target_work_hours: float
    status_text: str
    categories: list[CategorySummary] = field(default_factory=list)


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def round_minutes(minutes: int, step: int = ROUNDING_STEP_MINUTES) -> int:
    """Round to the nearest multiple of step, halves going up."""

    return (2 * minutes + step) // (2 * step) * step


def round_duration_string(value: str) -> str:
    """Round a '1h 32m' style duration to the nearest five minutes ('1h 30m').

    Whole hours drop the minute part ('2h 58m' -> '3h'); '-' for malformed input.
    """

    match = _DURATION_STRING_PATTERN.fullmatch(value.strip()) if isinstance(value, str) else None
    if not match or (match.group(1) is None and match.group(2) is None):
        return "-"

    total = int(match.group(1) or 0) * 60 + int(match.group(2) or 0)
    hours, minutes = divmod(round_minutes(total), 60)
    if hours > 0 and minutes == 0:
        return f"{hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def status_text(has_end_task: bool, total_minutes: int, target_work_hours: float) -> str:
    alerts = []
    if not has_end_task:
        alerts.append(STATUS_NOT_FINALIZED)
    if total_minutes >= target_work_hours * 60:
        alerts.append(STATUS_TARGET_REACHED)
    return ", ".join(alerts) if alerts else STATUS_NO_ALERTS


def build_daily_report(
    records: list[TaskRecord],
    report_date: str,
    target_work_hours: float = DEFAULT_TARGET_WORK_HOURS,
    now: Optional[datetime] = None,
) -> DailyReport:
    """Aggregate one day of records into category and task summaries."""

    day_records = [record for record in records if record.date == report_date]
    durations = standard_task_durations(day_records, now=now)

    category_minutes: dict[str, int] = defaultdict(int)
    category_counts: dict[str, int] = defaultdict(int)
    task_minutes: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    task_counts: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))

    for record, minutes in durations:
        category_minutes[record.category_name] += minutes
        category_counts[record.category_name] += 1
        task_minutes[record.category_name][record.task_name] += minutes
        task_counts[record.category_name][record.task_name] += 1

    total_minutes = sum(category_minutes.values())

    categories = []
    for name, minutes in category_minutes.items():
        summaries = [
            TaskSummary(
                name=task_name,
                count=task_counts[name][task_name],
                minutes=task_total,
                total_time=format_duration_minutes(task_total),
                rounded_time=round_duration_string(format_duration_minutes(task_total)),
            )
            for task_name, task_total in task_minutes[name].items()
        ]
        summaries.sort(key=lambda summary: summary.minutes, reverse=True)
        percentage = (minutes / total_minutes * 100.0) if total_minutes > 0 else 0.0
        categories.append(
            CategorySummary(
                name=name,
                task_count=category_counts[name],
                minutes=minutes,
                total_time=format_duration_minutes(minutes),
                percentage=clamp_percent(percentage),
                task_summaries=summaries,
            )
        )
    categories.sort(key=lambda category: category.minutes, reverse=True)

    has_end_task = any(record.task_type == TASK_TYPE_END for record in day_records)
    standard_count = sum(1 for record in day_records if record.task_type == TASK_TYPE_NORMAL)

    return DailyReport(
        date=report_date,
        title=format_date_string(report_date),
        total_minutes=total_minutes,
        total_time=format_duration_minutes(total_minutes),
        has_end_task=has_end_task,
        standard_task_count=standard_count,
        target_work_hours=target_work_hours,
        status_text=status_text(has_end_task, total_minutes, target_work_hours),
        categories=categories,
    )


def report_to_dict(report: DailyReport) -> dict:
    return asdict(report)
