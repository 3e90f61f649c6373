"""User settings stored as a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from tasktime.report import DEFAULT_TARGET_WORK_HOURS
from tasktime.validation import MIN_RETENTION_DAYS, is_valid_http_port, validate_http_port

logger = logging.getLogger(__name__)

DEFAULT_HTTP_SERVER_PORT = 14474


@dataclass
class Settings:
    target_work_hours: float = DEFAULT_TARGET_WORK_HOURS
    http_server_enabled: bool = False
    http_server_port: int = DEFAULT_HTTP_SERVER_PORT
    retention_days: Optional[int] = None


def _valid_target_hours(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float)) and 0 < value <= 24


def _valid_retention_days(value) -> bool:
    if value is None:
        return True
    return not isinstance(value, bool) and isinstance(value, int) and value >= MIN_RETENTION_DAYS


def load_settings(path) -> Settings:
    """Load settings, keeping the default for every missing or invalid value."""

    settings = Settings()
    path = Path(path)
    if not path.exists():
        return settings

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Settings file {path} is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    if "target_work_hours" in payload:
        if _valid_target_hours(payload["target_work_hours"]):
            settings.target_work_hours = payload["target_work_hours"]
        else:
            logger.warning("Ignoring invalid target_work_hours %r", payload["target_work_hours"])

    if "http_server_enabled" in payload:
        if isinstance(payload["http_server_enabled"], bool):
            settings.http_server_enabled = payload["http_server_enabled"]
        else:
            logger.warning("Ignoring invalid http_server_enabled %r", payload["http_server_enabled"])

    if "http_server_port" in payload:
        if is_valid_http_port(payload["http_server_port"]):
            settings.http_server_port = payload["http_server_port"]
        else:
            logger.warning("Ignoring invalid http_server_port %r", payload["http_server_port"])

    if "retention_days" in payload:
        if _valid_retention_days(payload["retention_days"]):
            settings.retention_days = payload["retention_days"]
        else:
            logger.warning("Ignoring invalid retention_days %r", payload["retention_days"])

    return settings


def save_settings(settings: Settings, path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")


def http_server_bind_port(settings: Settings) -> int:
    """Port the local HTTP server binds to; raises ValueError if the setting is unusable."""

    return validate_http_port(settings.http_server_port)
