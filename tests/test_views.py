import csv
from datetime import date

from payroll_preview.csv_io import export_daily_breakdown, export_summaries
from payroll_preview.models import DailyBreakdown, EmployeePayrollSummary, PayrollPreview
from payroll_preview.views import format_breakdown, format_duration, format_duration_with_seconds, format_preview


def build_summary() -> EmployeePayrollSummary:
    return EmployeePayrollSummary(
        user_id="u1",
        email="ada@example.com",
        name=None,
        total_worked_minutes=540,
        overtime_minutes=60,
        paid_leave_days=1,
        unpaid_leave_days=0,
        daily_breakdown=(
            DailyBreakdown(date=date(2024, 3, 1), worked_minutes=0, overtime_minutes=0, has_paid_leave=True),
            DailyBreakdown(date=date(2024, 3, 2), worked_minutes=540, overtime_minutes=60),
        ),
    )


def test_format_duration_variants():
    assert format_duration(150) == "2h 30m"
    assert format_duration(120) == "2h"
    assert format_duration(45) == "45m"
    assert format_duration(0) == "0m"
    assert format_duration(-5) == "0m"
    assert format_duration_with_seconds(9045) == "2h 30m 45s"
    assert format_duration_with_seconds(45) == "45s"
    assert format_duration_with_seconds(3600) == "1h 0m 0s"


def test_format_preview_and_breakdown_fall_back_to_email():
    summary = build_summary()

    table = format_preview(PayrollPreview(month="2024-03", employees=(summary,))).splitlines()
    breakdown = format_breakdown(summary).splitlines()

    assert table[0] == "Payroll preview 2024-03"
    assert table[2].startswith("ada@example.com")
    assert "9h" in table[2]
    assert table[-1] == "Employees: 1"
    assert breakdown[2].startswith("2024-03-01") and breakdown[2].endswith("paid")
    assert breakdown[3].endswith("-")
    assert breakdown[-1] == "Total worked: 9h  overtime: 1h"


def test_csv_exports(tmp_path):
    summary = build_summary()
    summary_path = tmp_path / "summary.csv"
    daily_path = tmp_path / "daily.csv"

    export_summaries(summary_path, [summary])
    export_daily_breakdown(daily_path, summary)

    with summary_path.open() as handle:
        rows = list(csv.DictReader(handle))
    assert rows == [
        {
            "user_id": "u1",
            "email": "ada@example.com",
            "name": "",
            "total_worked_minutes": "540",
            "overtime_minutes": "60",
            "paid_leave_days": "1",
            "unpaid_leave_days": "0",
        }
    ]
    with daily_path.open() as handle:
        daily = list(csv.DictReader(handle))
    assert [row["date"] for row in daily] == ["2024-03-01", "2024-03-02"]
    assert daily[0]["has_paid_leave"] == "True"
