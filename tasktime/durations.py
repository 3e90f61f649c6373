"""Per-task durations and category totals for a day of task records."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from tasktime.schema import DURATION_VISIBLE_BY_TASK_TYPE, TASK_TYPE_NORMAL, TaskRecord
from tasktime.time_utils import format_duration_minutes, get_last_task_end_time, parse_time_string


@dataclass
class CategoryTotal:
    name: str
    minutes: int
    percentage: float


def sort_task_records(records: list[TaskRecord]) -> list[TaskRecord]:
    """Return the day's timeline: records with a valid start time, ordered by start."""

    timed = [record for record in records if parse_time_string(record.start_time) is not None]
    return sorted(timed, key=lambda record: parse_time_string(record.start_time))


def _timeline_index(timeline: list[TaskRecord], record: TaskRecord) -> Optional[int]:
    for index, candidate in enumerate(timeline):
        if candidate is record:
            return index
    if record.id is not None:
        for index, candidate in enumerate(timeline):
            if candidate.id == record.id:
                return index
    return None


def _duration_on_timeline(timeline: list[TaskRecord], index: int, now: Optional[datetime]) -> Optional[int]:
    record = timeline[index]
    start = parse_time_string(record.start_time)

    if index < len(timeline) - 1:
        next_start = parse_time_string(timeline[index + 1].start_time)
        if next_start <= start:
            return None
        return math.floor(next_start - start)

    end = get_last_task_end_time(record.date, start, now=now)
    return math.floor(max(0.0, end - start))


def task_duration_minutes(records: list[TaskRecord], record: TaskRecord, now: Optional[datetime] = None) -> Optional[int]:
    """Whole minutes from a record's start to the next start or to the end of its interval.

    None when the record is not on the timeline or the next task does not start later.
    """

    timeline = sort_task_records(records)
    index = _timeline_index(timeline, record)
    if index is None:
        return None
    return _duration_on_timeline(timeline, index, now)


def calculate_duration(records: list[TaskRecord], record: TaskRecord, now: Optional[datetime] = None) -> str:
    """Display string for a single record's duration, '-' where it has none."""

    if not DURATION_VISIBLE_BY_TASK_TYPE.get(record.task_type, False):
        return "-"
    minutes = task_duration_minutes(records, record, now=now)
    if minutes is None:
        return "-"
    return format_duration_minutes(minutes)


def standard_task_durations(records: list[TaskRecord], now: Optional[datetime] = None) -> list[tuple[TaskRecord, int]]:
    """Durations of all normal tasks on the timeline, undefined durations counted as zero."""

    timeline = sort_task_records(records)
    durations = []
    for index, record in enumerate(timeline):
        if record.task_type != TASK_TYPE_NORMAL:
            continue
        minutes = _duration_on_timeline(timeline, index, now)
        durations.append((record, minutes or 0))
    return durations


def total_minutes_tracked(records: list[TaskRecord], now: Optional[datetime] = None) -> int:
    return sum(minutes for _, minutes in standard_task_durations(records, now=now))


def category_breakdown(records: list[TaskRecord], now: Optional[datetime] = None) -> list[CategoryTotal]:
    """Minutes and share of the day per category, largest first."""

    totals: dict[str, int] = defaultdict(int)
    for record, minutes in standard_task_durations(records, now=now):
        totals[record.category_name] += minutes

    total_minutes = sum(totals.values())
    breakdown = [
        CategoryTotal(
            name=name,
            minutes=minutes,
            percentage=(minutes / total_minutes * 100.0) if total_minutes > 0 else 0.0,
        )
        for name, minutes in totals.items()
    ]
    return sorted(breakdown, key=lambda item: item.minutes, reverse=True)
