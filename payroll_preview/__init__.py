"""Monthly payroll preview built from time sessions and leave requests."""

from .models import (
    BreakSession,
    DailyBreakdown,
    Employee,
    EmployeePayrollSummary,
    EmployeeRecords,
    LeaveRequest,
    LeaveStatus,
    LeaveType,
    MonthBounds,
    PayrollPreview,
    TimeSession,
    TimeSessionStatus,
)
from .summary import build_employee_summary, build_payroll_preview

__all__ = [
    "BreakSession",
    "DailyBreakdown",
    "Employee",
    "EmployeePayrollSummary",
    "EmployeeRecords",
    "LeaveRequest",
    "LeaveStatus",
    "LeaveType",
    "MonthBounds",
    "PayrollPreview",
    "TimeSession",
    "TimeSessionStatus",
    "build_employee_summary",
    "build_payroll_preview",
]
