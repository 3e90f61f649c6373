"""Normalization of categories and task records restored from a backup."""

from __future__ import annotations

import logging

from tasktime.schema import CATEGORY_CODE_MAX_LENGTH, TASK_TYPE_END, TASK_TYPE_NORMAL, TASK_TYPES, Category, TaskRecord

logger = logging.getLogger(__name__)


def _text(item: dict, key: str) -> str:
    value = item.get(key) if isinstance(item, dict) else None
    return "" if value is None else str(value).strip()


def normalize_categories(items: list) -> list[Category]:
    """Deduplicate categories by name and keep exactly one default."""

    seen = set()
    categories: list[Category] = []
    for item in items:
        name = _text(item, "name")
        if not name or name in seen:
            continue
        seen.add(name)
        code = _text(item, "code")[:CATEGORY_CODE_MAX_LENGTH]
        is_default = bool(item.get("is_default"))
        categories.append(Category(name=name, code=code, is_default=is_default))

    default_name = next((c.name for c in categories if c.is_default), None)
    if default_name is None and categories:
        default_name = categories[0].name

    return [Category(name=c.name, code=c.code, is_default=c.name == default_name) for c in categories]


def normalize_task_records(items: list) -> list[TaskRecord]:
    """Clean restored task records, skipping incomplete ones and extra end markers."""

    end_dates = set()
    records: list[TaskRecord] = []
    skipped = 0
    for item in items:
        category_name = _text(item, "category_name")
        task_name = _text(item, "task_name")
        start_time = _text(item, "start_time")
        record_date = _text(item, "date")
        task_type = (_text(item, "task_type") or TASK_TYPE_NORMAL).lower()
        if task_type not in TASK_TYPES:
            task_type = TASK_TYPE_NORMAL

        if not (category_name and task_name and start_time and record_date):
            skipped += 1
            continue
        if task_type == TASK_TYPE_END:
            if record_date in end_dates:
                skipped += 1
                continue
            end_dates.add(record_date)

        created_at = item.get("created_at")
        records.append(
            TaskRecord(
                category_name=category_name,
                task_name=task_name,
                start_time=start_time,
                date=record_date,
                task_type=task_type,
                created_at=None if created_at is None else str(created_at),
            )
        )

    if skipped:
        logger.warning("Skipped %d task records while normalizing backup", skipped)
    return records
