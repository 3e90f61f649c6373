"""Retention policy: drop task records older than a validated cutoff date."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from tasktime.date_utils import parse_ymd, to_ymd_local
from tasktime.schema import TaskRecord
from tasktime.validation import MIN_RETENTION_DAYS, validate_cutoff_date

logger = logging.getLogger(__name__)


def cutoff_for_retention(retention_days: int, today: Optional[date] = None) -> str:
    """Cutoff date string for keeping the last retention_days days."""

    if isinstance(retention_days, bool) or not isinstance(retention_days, int):
        raise ValueError("Retention days must be an integer")
    if retention_days < MIN_RETENTION_DAYS:
        raise ValueError(f"Retention days must be at least {MIN_RETENTION_DAYS}")

    today = today or date.today()
    return to_ymd_local(today - timedelta(days=retention_days))


def evict_records(
    records: list[TaskRecord], cutoff_date: str, today: Optional[date] = None
) -> tuple[list[TaskRecord], int]:
    """Keep records dated on or after the cutoff; return (kept, removed_count)."""

    cutoff = parse_ymd(validate_cutoff_date(cutoff_date, today=today))

    kept = []
    for record in records:
        record_date = parse_ymd(record.date)
        if record_date is not None and record_date < cutoff:
            continue
        kept.append(record)

    removed = len(records) - len(kept)
    if removed:
        logger.info("Evicted %d task records dated before %s", removed, cutoff_date)
    return kept, removed
