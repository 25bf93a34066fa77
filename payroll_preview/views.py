from __future__ import annotations
from typing import List

from .models import EmployeePayrollSummary, PayrollPreview


def format_duration(minutes: int) -> str:
    """Render minutes as ``2h 30m``, ``45m`` or ``0m``."""
    if minutes < 0:
        return "0m"
    hours, mins = divmod(minutes, 60)
    if hours and mins:
        return f"{hours}h {mins}m"
    if hours:
        return f"{hours}h"
    return f"{mins}m"


def format_duration_with_seconds(total_seconds: int) -> str:
    if total_seconds < 0:
        return "0s"
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    parts: List[str] = []
    if hours:
        parts.append(f"{hours}h")
    if minutes or hours:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")
    return " ".join(parts)


def _leave_marker(has_paid: bool, has_unpaid: bool) -> str:
    if has_paid and has_unpaid:
        return "paid+unpaid"
    if has_paid:
        return "paid"
    if has_unpaid:
        return "unpaid"
    return "-"


def format_preview(preview: PayrollPreview) -> str:
    rows = [
        f"Payroll preview {preview.month}",
        "Employee                       Worked     Overtime   Paid leave  Unpaid leave",
    ]
    for summary in preview.employees:
        label = summary.name or summary.email
        rows.append(
            f"{label:<30} {format_duration(summary.total_worked_minutes):>9}  {format_duration(summary.overtime_minutes):>9}"
            f"  {summary.paid_leave_days:>10}  {summary.unpaid_leave_days:>12}"
        )
    rows.append(f"Employees: {len(preview.employees)}")
    return "\n".join(rows)


def format_breakdown(summary: EmployeePayrollSummary) -> str:
    rows = [
        f"Daily breakdown for {summary.name or summary.email}",
        "Date        Worked     Overtime   Leave",
    ]
    for day in summary.daily_breakdown:
        rows.append(
            f"{day.date.isoformat()}  {format_duration(day.worked_minutes):>9}  {format_duration(day.overtime_minutes):>9}"
            f"  {_leave_marker(day.has_paid_leave, day.has_unpaid_leave)}"
        )
    rows.append(
        f"Total worked: {format_duration(summary.total_worked_minutes)}  overtime: {format_duration(summary.overtime_minutes)}"
    )
    return "\n".join(rows)
