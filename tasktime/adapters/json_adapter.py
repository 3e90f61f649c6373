"""JSON adapter for task records."""

from __future__ import annotations

import json

from tasktime.date_utils import parse_ymd
from tasktime.schema import TASK_TYPE_NORMAL, TASK_TYPES, TaskRecord
from tasktime.time_utils import parse_time_string

_REQUIRED_FIELDS = ("category_name", "task_name", "start_time", "date")


def _parse_item(item: dict, index: int) -> TaskRecord:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if not str(item.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    start_time = str(item["start_time"]).strip()
    if parse_time_string(start_time) is None:
        raise ValueError(f"Item {index}: malformed start_time '{start_time}'")

    record_date = str(item["date"]).strip()
    if parse_ymd(record_date) is None:
        raise ValueError(f"Item {index}: malformed date '{record_date}'")

    task_type = str(item.get("task_type") or TASK_TYPE_NORMAL).strip()
    if task_type not in TASK_TYPES:
        raise ValueError(f"Item {index}: invalid task_type '{task_type}'")

    record_id = item.get("id")
    try:
        record_id = int(record_id) if record_id is not None else None
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid id") from exc

    created_at = item.get("created_at")

    return TaskRecord(
        category_name=str(item["category_name"]).strip(),
        task_name=str(item["task_name"]).strip(),
        start_time=start_time,
        date=record_date,
        task_type=task_type,
        id=record_id,
        created_at=str(created_at) if created_at is not None else None,
    )


def parse(file_path: str) -> list[TaskRecord]:
    """Parse JSON file into task records.

    The payload is either a list of records or an object holding them under
    'task_records'.
    """

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if isinstance(payload, dict):
        payload = payload.get("task_records")

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of task records")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
