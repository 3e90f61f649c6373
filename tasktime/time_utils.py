"""Time-of-day parsing, duration formatting and end-of-interval resolution."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Optional

from tasktime.date_utils import parse_ymd

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?", re.ASCII)
_TIME_INPUT_PATTERN = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_time_string(value) -> Optional[float]:
    """Parse 'HH:mm' or 'HH:mm:ss' into minutes after midnight.

    Seconds become fractional minutes. Returns None for anything that is not a
    zero-padded time of day.
    """

    if not isinstance(value, str):
        return None
    match = _TIME_PATTERN.fullmatch(value.strip())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    return hours * 60 + minutes + seconds / 60


def format_duration_minutes(total_minutes: float) -> str:
    """Format a minute count like '2h 5m' or '45m'.

    Negative and non-finite counts render as "0m".
    """

    if not math.isfinite(total_minutes):
        return "0m"
    normalized = _round_half_up(max(0.0, total_minutes))
    hours, minutes = divmod(normalized, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def get_last_task_end_time(task_date: str, task_start_minutes: float, now: Optional[datetime] = None) -> float:
    """Return the end boundary, in minutes, of the last task of a day.

    Past days run to midnight (1440). Future days and invalid dates yield the
    start itself, i.e. a zero duration. For today the task runs until the
    current minute, unless it has not started yet.
    """

    record_date = parse_ymd(task_date)
    if record_date is None:
        return task_start_minutes

    now = now or datetime.now()
    today = now.date()

    if record_date > today:
        return task_start_minutes
    if record_date < today:
        return MINUTES_PER_DAY

    now_minutes = _round_half_up(now.hour * 60 + now.minute + now.second / 60)
    if task_start_minutes > now_minutes:
        return task_start_minutes
    return min(now_minutes, MINUTES_PER_DAY - 1)


def normalize_time_input(value: str) -> str:
    """Validate user-typed time input and normalize it to zero-padded 'HH:mm'."""

    trimmed = value.strip()
    if not trimmed:
        raise ValueError("Time cannot be empty")

    match = _TIME_INPUT_PATTERN.fullmatch(trimmed)
    if not match:
        raise ValueError("Time must be in HH:mm format (e.g., 09:30 or 14:15)")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    if not 0 <= hours <= 23:
        raise ValueError("Hours must be between 00 and 23")
    if not 0 <= minutes <= 59:
        raise ValueError("Minutes must be between 00 and 59")
    return f"{hours:02d}:{minutes:02d}"


def current_time_string(now: Optional[datetime] = None) -> str:
    """Current time of day as zero-padded HH:mm, seconds dropped."""

    now = now or datetime.now()
    return f"{now.hour:02d}:{now.minute:02d}"
