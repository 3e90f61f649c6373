from datetime import datetime

from tasktime.report import (
    STATUS_NO_ALERTS,
    build_daily_report,
    clamp_percent,
    report_to_dict,
    round_duration_string,
    status_text,
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


def test_build_daily_report():
    records = sample_day()
    report = build_daily_report(records, "2024-01-15", target_work_hours=8, now=EVENING)

    assert report.title == "Monday, January 15, 2024"
    assert report.total_minutes == 495
    assert report.total_time == "8h 15m"
    assert report.has_end_task
    assert report.standard_task_count == 7
    assert report.status_text == "Daily target work hours reached"

    work = report.categories[0]
    assert work.name == "Work"
    assert work.task_count == 5
    assert work.total_time == "7h 10m"
    assert [s.name for s in work.task_summaries] == ["Development", "Code review", "Email"]

    development = work.task_summaries[0]
    assert development.count == 3
    assert development.total_time == "4h 15m"
    assert development.rounded_time == "4h 15m"
    assert work.task_summaries[1].rounded_time == "2h 25m"


def test_report_ignores_other_days():
    records = sample_day()
    other = TaskRecord("Work", "Yesterday", "09:00", "2024-01-14")
    report = build_daily_report(records + [other], "2024-01-15", now=EVENING)
    assert report.total_minutes == 495


def test_report_for_empty_day():
    report = build_daily_report([], "2024-01-15", now=datetime(2024, 1, 15, 9, 0))
    assert report.total_time == "0m"
    assert report.categories == []
    assert report.status_text == "Day not finalized - missing end task"


def test_report_to_dict():
    records = sample_day()
    payload = report_to_dict(build_daily_report(records, "2024-01-15", now=EVENING))
    assert payload["categories"][1]["name"] == "Personal"
    assert payload["categories"][1]["task_summaries"][0]["count"] == 1


def test_round_duration_string():
    assert round_duration_string("1h 32m") == "1h 30m"
    assert round_duration_string("1h 33m") == "1h 35m"
    assert round_duration_string("47m") == "45m"
    assert round_duration_string("48m") == "50m"
    assert round_duration_string("2h") == "2h"
    assert round_duration_string("7m") == "5m"
    assert round_duration_string("0m") == "0m"
    assert round_duration_string("2m") == "0m"
    assert round_duration_string("3m") == "5m"
    assert round_duration_string("3h 58m") == "4h"
    assert round_duration_string("1h 2m") == "1h"
    assert round_duration_string("12h 3m") == "12h 5m"
    assert round_duration_string("2h 58m") == "3h"


def test_round_duration_string_malformed():
    for value in ["", "invalid", "h m", None]:
        assert round_duration_string(value) == "-"


def test_clamp_percent():
    assert clamp_percent(50) == 50
    assert clamp_percent(-10) == 0
    assert clamp_percent(150) == 100


def test_status_text():
    assert status_text(True, 480, 8) == "Daily target work hours reached"
    assert status_text(False, 300, 8) == "Day not finalized - missing end task"
    assert status_text(False, 480, 8) == "Day not finalized - missing end task, Daily target work hours reached"
    assert status_text(True, 300, 8) == STATUS_NO_ALERTS
