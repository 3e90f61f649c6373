"""Validators for settings that guard destructive or network-facing actions."""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Optional

from tasktime.date_utils import parse_ymd

MIN_RETENTION_DAYS = 30
MIN_YEAR = 1970

MIN_HTTP_PORT = 1024
MAX_HTTP_PORT = 65535

_CUTOFF_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def validate_cutoff_date(cutoff_date, today: Optional[date] = None) -> str:
    """Validate a YYYY-MM-DD cutoff below which records may be deleted.

    The checks run in a fixed order and each failure has its own message.
    Returns the input unchanged.
    """

    if not isinstance(cutoff_date, str) or not cutoff_date.strip():
        raise ValueError("Invalid cutoff date: must be a non-empty string")

    if not _CUTOFF_PATTERN.fullmatch(cutoff_date):
        raise ValueError("Invalid cutoff date: must match YYYY-MM-DD format")

    parsed = parse_ymd(cutoff_date)
    if parsed is None:
        raise ValueError("Invalid cutoff date: must be a valid calendar date")

    today = today or date.today()
    if parsed.year < MIN_YEAR or parsed.year > today.year:
        raise ValueError(f"Invalid cutoff date: year must be between {MIN_YEAR} and {today.year}")

    if parsed > today:
        raise ValueError("Invalid cutoff date: cannot be in the future")

    if parsed > today - timedelta(days=MIN_RETENTION_DAYS):
        raise ValueError(f"Invalid cutoff date: must be at least {MIN_RETENTION_DAYS} days before today")

    return cutoff_date


def is_valid_http_port(port) -> bool:
    if isinstance(port, bool) or not isinstance(port, int):
        return False
    return MIN_HTTP_PORT <= port <= MAX_HTTP_PORT


def validate_http_port(port) -> int:
    """Return the port unchanged if it is an unprivileged TCP port."""

    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"Invalid HTTP port {port!r}: must be an integer")
    if not MIN_HTTP_PORT <= port <= MAX_HTTP_PORT:
        raise ValueError(f"Invalid HTTP port {port}: must be between {MIN_HTTP_PORT} and {MAX_HTTP_PORT}")
    return port
