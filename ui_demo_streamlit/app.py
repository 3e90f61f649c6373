"""Streamlit daily report viewer for tasktime."""

from __future__ import annotations

import tempfile
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from tasktime.adapters import csv_adapter, json_adapter
from tasktime.date_utils import to_ymd_local
from tasktime.durations import calculate_duration, sort_task_records
from tasktime.report import build_daily_report, report_to_dict
from tasktime.schema import SPECIAL_TASK_CATEGORY


def _parse_records_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_records_from_path(temp_path)


def _task_rows(records: list, report_date: str, now: datetime) -> list[dict[str, str]]:
    day_records = [record for record in records if record.date == report_date]
    return [
        {
            "start": record.start_time,
            "category": "" if record.category_name == SPECIAL_TASK_CATEGORY else record.category_name,
            "task": record.task_name,
            "type": record.task_type,
            "duration": calculate_duration(day_records, record, now=now),
        }
        for record in sort_task_records(day_records)
    ]


def run_report(records: list, report_date: str, target_hours: float, now: datetime) -> dict[str, Any]:
    """Build the task list and the daily report payload for the UI."""

    report = build_daily_report(records, report_date, target_work_hours=target_hours, now=now)
    return {
        "tasks": _task_rows(records, report_date, now),
        "report": report_to_dict(report),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="tasktime daily report", layout="wide")
    st.title("Daily Report")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload task records", type=["csv", "json"])
        use_demo = st.checkbox("Load demo day", value=True)
        report_day = st.date_input("Report date", value=date(2024, 1, 15))
        as_of_day = st.date_input("Evaluate on", value=date(2024, 1, 15))
        as_of_time = st.time_input("Evaluate at", value=time(17, 45))
        target_hours = st.number_input("Target work hours", min_value=0.5, max_value=24.0, value=8.0, step=0.5)
        run = st.button("Build report", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Build report**.")
        return

    try:
        if use_demo:
            records = csv_adapter.parse("examples/sample_day.csv")
            data_source = "demo day (examples/sample_day.csv)"
        elif uploaded is not None:
            records = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo day'.")
            return

        if not records:
            st.error("No task records were found in the selected input.")
            return

        now = datetime.combine(as_of_day, as_of_time)
        result = run_report(records, to_ymd_local(report_day), float(target_hours), now)
        report = result["report"]

        st.success(f"Loaded {len(records)} task records from {data_source}.")

        st.subheader(f"{report['title']}: {report['total_time']}")
        c1, c2, c3 = st.columns(3)
        c1.metric("Tracked", report["total_time"])
        c2.metric("Standard tasks", report["standard_task_count"])
        c3.metric("Target", f"{report['target_work_hours']:g}h")
        st.write(report["status_text"])

        st.subheader("Tasks")
        st.table(result["tasks"])

        st.subheader("Categories")
        for category in report["categories"]:
            st.write(f"**{category['name']}**: {category['total_time']} ({category['percentage']:.1f}%)")
            st.progress(min(1.0, category["percentage"] / 100.0))
            st.table(
                [
                    {
                        "task": summary["name"],
                        "count": f"{summary['count']}x",
                        "rounded": summary["rounded_time"],
                        "actual": summary["total_time"],
                    }
                    for summary in category["task_summaries"]
                ]
            )

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while building the report. Please verify the input format.")


if __name__ == "__main__":
    main()
