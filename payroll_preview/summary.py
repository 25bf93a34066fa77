from __future__ import annotations
from typing import Iterable, List, Optional

from .leave import count_leave_days, leave_flags_for_day
from .logging import get_logger
from .models import DailyBreakdown, EmployeePayrollSummary, EmployeeRecords, MonthBounds, PayrollPreview
from .overtime import calculate_overtime_minutes
from .periods import get_month_bounds
from .worked_time import calculate_daily_worked_minutes

logger = get_logger(__name__)


def build_daily_breakdown(records: EmployeeRecords, bounds: MonthBounds) -> List[DailyBreakdown]:
    breakdown: List[DailyBreakdown] = []
    for day in bounds.days:
        worked = calculate_daily_worked_minutes(records.sessions, day)
        has_paid, has_unpaid = leave_flags_for_day(records.leaves, day)
        breakdown.append(
            DailyBreakdown(
                date=day.date(),
                worked_minutes=worked,
                overtime_minutes=calculate_overtime_minutes(worked),
                has_paid_leave=has_paid,
                has_unpaid_leave=has_unpaid,
            )
        )
    return breakdown


def build_employee_summary(records: EmployeeRecords, bounds: MonthBounds) -> EmployeePayrollSummary:
    breakdown = build_daily_breakdown(records, bounds)
    leave_days = count_leave_days(records.leaves, bounds.start, bounds.end)
    employee = records.employee

    summary = EmployeePayrollSummary(
        user_id=employee.user_id,
        email=employee.email,
        name=employee.display_name,
        total_worked_minutes=sum(day.worked_minutes for day in breakdown),
        overtime_minutes=sum(day.overtime_minutes for day in breakdown),
        paid_leave_days=leave_days.paid,
        unpaid_leave_days=leave_days.unpaid,
        daily_breakdown=tuple(breakdown),
    )
    logger.debug(
        "employee_summary_built",
        month=bounds.month,
        user_id=summary.user_id,
        worked_minutes=summary.total_worked_minutes,
        overtime_minutes=summary.overtime_minutes,
        paid_leave_days=summary.paid_leave_days,
        unpaid_leave_days=summary.unpaid_leave_days,
    )
    return summary


def build_payroll_preview(
    month: str,
    employees: Iterable[EmployeeRecords],
    timezone: Optional[str] = None,
) -> PayrollPreview:
    """Summarise every employee for ``month``, keeping the order they were supplied in."""
    bounds = get_month_bounds(month, timezone or "UTC")
    summaries = tuple(build_employee_summary(records, bounds) for records in employees)
    logger.info("payroll_preview_built", month=month, timezone=bounds.timezone, employees=len(summaries))
    return PayrollPreview(month=month, employees=summaries)
