from __future__ import annotations
import csv
from pathlib import Path
from typing import Iterable

from .models import EmployeePayrollSummary


SUMMARY_HEADERS = [
    "user_id",
    "email",
    "name",
    "total_worked_minutes",
    "overtime_minutes",
    "paid_leave_days",
    "unpaid_leave_days",
]

DAILY_HEADERS = [
    "date",
    "worked_minutes",
    "overtime_minutes",
    "has_paid_leave",
    "has_unpaid_leave",
]


def export_summaries(path: Path, summaries: Iterable[EmployeePayrollSummary]) -> None:
    with path.open("w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=SUMMARY_HEADERS)
        writer.writeheader()
        for summary in summaries:
            writer.writerow(
                {
                    "user_id": summary.user_id,
                    "email": summary.email,
                    "name": summary.name or "",
                    "total_worked_minutes": summary.total_worked_minutes,
                    "overtime_minutes": summary.overtime_minutes,
                    "paid_leave_days": summary.paid_leave_days,
                    "unpaid_leave_days": summary.unpaid_leave_days,
                }
            )


def export_daily_breakdown(path: Path, summary: EmployeePayrollSummary) -> None:
    with path.open("w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=DAILY_HEADERS)
        writer.writeheader()
        for day in summary.daily_breakdown:
            writer.writerow(
                {
                    "date": day.date.isoformat(),
                    "worked_minutes": day.worked_minutes,
                    "overtime_minutes": day.overtime_minutes,
                    "has_paid_leave": day.has_paid_leave,
                    "has_unpaid_leave": day.has_unpaid_leave,
                }
            )
