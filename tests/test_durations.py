from datetime import datetime

from tasktime.durations import (
    calculate_duration,
    category_breakdown,
    sort_task_records,
    task_duration_minutes,
    total_minutes_tracked,
)
from tasktime.schema import SPECIAL_TASK_CATEGORY, TaskRecord

EVENING = datetime(2024, 1, 15, 17, 45, 0)


def sample_day():
    def record(category, task, start, task_type="normal"):
        return TaskRecord(category, task, start, "2024-01-15", task_type)

    return [
        record("Work", "Email", "08:30"),
        record("Work", "Development", "09:00"),
        record("Meetings", "Standup", "10:30"),
        record("Work", "Development", "10:45"),
        record(SPECIAL_TASK_CATEGORY, "Pause", "12:00", "pause"),
        record("Work", "Code review", "12:45"),
        record("Personal", "Exercise", "15:10"),
        record("Work", "Development", "16:00"),
        record(SPECIAL_TASK_CATEGORY, "End", "17:30", "end"),
    ]


def test_open_task_runs_until_now():
    records = [
        TaskRecord("Work", "Planning", "09:00", "2024-01-15"),
        TaskRecord("Work", "Coding", "10:30", "2024-01-15"),
    ]
    now = datetime(2024, 1, 15, 12, 0, 0)
    assert task_duration_minutes(records, records[0], now=now) == 90
    assert task_duration_minutes(records, records[1], now=now) == 90
    assert calculate_duration(records, records[0], now=now) == "1h 30m"
    assert calculate_duration(records, records[1], now=now) == "1h 30m"


def test_sort_task_records_orders_by_start_and_drops_untimed():
    late = TaskRecord("Work", "B", "14:00", "2024-01-15")
    early = TaskRecord("Work", "A", "08:15", "2024-01-15")
    untimed = TaskRecord("Work", "C", "", "2024-01-15")
    broken = TaskRecord("Work", "D", "8:15", "2024-01-15")
    assert sort_task_records([late, untimed, early, broken]) == [early, late]


def test_calculate_duration_by_task_type():
    records = sample_day()
    pause = records[4]
    end = records[8]
    assert calculate_duration(records, pause, now=EVENING) == "45m"
    assert calculate_duration(records, end, now=EVENING) == "-"


def test_calculate_duration_for_record_not_on_timeline():
    records = sample_day()
    stranger = TaskRecord("Work", "Elsewhere", "09:00", "2024-01-15")
    assert calculate_duration(records, stranger, now=EVENING) == "-"


def test_records_can_be_matched_by_id():
    stored = [TaskRecord("Work", "A", "09:00", "2024-01-15", id=1), TaskRecord("Work", "B", "09:20", "2024-01-15", id=2)]
    copy = TaskRecord("Work", "A", "09:00", "2024-01-15", id=1)
    assert task_duration_minutes(stored, copy, now=datetime(2024, 1, 15, 10, 0)) == 20


def test_same_start_time_has_no_duration():
    records = [
        TaskRecord("Work", "A", "09:00", "2024-01-15"),
        TaskRecord("Work", "B", "09:00", "2024-01-15"),
        TaskRecord("Work", "C", "09:30", "2024-01-15"),
    ]
    now = datetime(2024, 1, 15, 10, 0)
    assert calculate_duration(records, records[0], now=now) == "-"
    assert total_minutes_tracked(records, now=now) == 60


def test_last_task_on_past_and_future_days():
    past = [TaskRecord("Work", "Late shift", "22:00", "2024-01-10")]
    future = [TaskRecord("Work", "Planned", "09:00", "2024-01-20")]
    now = datetime(2024, 1, 15, 12, 0)
    assert calculate_duration(past, past[0], now=now) == "2h 0m"
    assert calculate_duration(future, future[0], now=now) == "0m"


def test_last_task_starting_after_now_today():
    records = [TaskRecord("Work", "Later", "15:00", "2024-01-15")]
    assert calculate_duration(records, records[0], now=datetime(2024, 1, 15, 12, 0)) == "0m"


def test_total_minutes_counts_normal_tasks_only():
    records = sample_day()
    assert total_minutes_tracked(records, now=EVENING) == 495


def test_category_breakdown():
    records = sample_day()
    breakdown = category_breakdown(records, now=EVENING)
    assert [item.name for item in breakdown] == ["Work", "Personal", "Meetings"]
    assert [item.minutes for item in breakdown] == [430, 50, 15]
    assert abs(sum(item.percentage for item in breakdown) - 100.0) < 1e-9
    assert breakdown[0].percentage == 430 / 495 * 100.0


def test_category_breakdown_empty():
    assert category_breakdown([]) == []
    assert total_minutes_tracked([]) == 0
