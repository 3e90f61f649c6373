"""Core data schema for task records and categories."""

from dataclasses import dataclass
from typing import Optional

TASK_TYPE_NORMAL = "normal"
TASK_TYPE_PAUSE = "pause"
TASK_TYPE_END = "end"

TASK_TYPES = (TASK_TYPE_NORMAL, TASK_TYPE_PAUSE, TASK_TYPE_END)
SPECIAL_TASK_TYPES = (TASK_TYPE_PAUSE, TASK_TYPE_END)

SPECIAL_TASK_CATEGORY = "__special__"

# The end marker closes the day, it has no duration of its own.
DURATION_VISIBLE_BY_TASK_TYPE = {
    TASK_TYPE_NORMAL: True,
    TASK_TYPE_PAUSE: True,
    TASK_TYPE_END: False,
}

CATEGORY_CODE_MAX_LENGTH = 10


@dataclass
class TaskRecord:
    """One logged activity of a day."""

    category_name: str
    task_name: str
    start_time: str
    date: str
    task_type: str = TASK_TYPE_NORMAL
    id: Optional[int] = None
    created_at: Optional[str] = None


@dataclass
class Category:
    name: str
    code: str = ""
    is_default: bool = False


def is_special(task_type: Optional[str]) -> bool:
    return task_type in SPECIAL_TASK_TYPES
