"""Calendar date helpers for YYYY-MM-DD strings."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Optional

_YMD_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def parse_ymd(value) -> Optional[date]:
    """Parse a strict YYYY-MM-DD string into a date, or None if it is not a real date."""

    if not isinstance(value, str):
        return None
    match = _YMD_PATTERN.fullmatch(value.strip())
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def to_ymd_local(value: date) -> str:
    """Render a date (or the date part of a local datetime) as YYYY-MM-DD."""

    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def is_today(value: str, today: Optional[date] = None) -> bool:
    """True when a YYYY-MM-DD string names today (or the given today)."""

    today = today or date.today()
    return value == to_ymd_local(today)


def format_date_string(value: str) -> str:
    """Format a YYYY-MM-DD string like 'Friday, January 15, 2024'."""

    parsed = parse_ymd(value)
    if parsed is None:
        return value
    return f"{parsed:%A}, {parsed:%B} {parsed.day}, {parsed.year}"


def shift_date(value: str, days: int) -> str:
    """Move a YYYY-MM-DD string by a number of days; raises ValueError on an invalid date."""

    parsed = parse_ymd(value)
    if parsed is None:
        raise ValueError(f"Invalid date '{value}': expected YYYY-MM-DD")
    return to_ymd_local(parsed + timedelta(days=days))
