"""CSV adapter for task records."""

from __future__ import annotations

import csv

from tasktime.date_utils import parse_ymd
from tasktime.schema import TASK_TYPE_NORMAL, TASK_TYPES, TaskRecord
from tasktime.time_utils import parse_time_string

_REQUIRED_FIELDS = ("category_name", "task_name", "start_time", "date")


def _parse_row(row: dict, row_number: int) -> TaskRecord:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    start_time = row["start_time"].strip()
    if parse_time_string(start_time) is None:
        raise ValueError(f"Row {row_number}: malformed start_time '{start_time}'")

    record_date = row["date"].strip()
    if parse_ymd(record_date) is None:
        raise ValueError(f"Row {row_number}: malformed date '{record_date}'")

    task_type = (row.get("task_type") or TASK_TYPE_NORMAL).strip()
    if task_type not in TASK_TYPES:
        raise ValueError(f"Row {row_number}: invalid task_type '{task_type}'")

    return TaskRecord(
        category_name=row["category_name"].strip(),
        task_name=row["task_name"].strip(),
        start_time=start_time,
        date=record_date,
        task_type=task_type,
    )


def parse(file_path: str) -> list[TaskRecord]:
    """Parse CSV file into a list of task records."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records: list[TaskRecord] = []
        for row_number, row in enumerate(reader, start=2):
            records.append(_parse_row(row, row_number))
        return records
