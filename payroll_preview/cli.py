from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List

from .config import Settings, get_settings
from .csv_io import export_daily_breakdown, export_summaries
from .errors import NotFoundError, PayrollPreviewError, ValidationError
from .leave import validate_leave_request
from .logging import configure_logging, get_logger
from .models import EmployeePayrollSummary, LeaveRequest, PayrollPreview
from .periods import current_month
from .schemas import PayrollPreviewOut
from .storage import load_roster
from .summary import build_payroll_preview
from .views import format_breakdown, format_preview

logger = get_logger(__name__)


def settings_from_args(args: argparse.Namespace) -> Settings:
    return get_settings()


def preview_from_args(args: argparse.Namespace) -> PayrollPreview:
    settings = settings_from_args(args)
    roster = load_roster(Path(args.input))
    month = args.month or roster.month or current_month()
    timezone = args.timezone or roster.timezone or settings.timezone
    return build_payroll_preview(month, roster.to_domain(), timezone=timezone)


def find_summary(preview: PayrollPreview, user_id: str) -> EmployeePayrollSummary:
    summary = preview.find(user_id)
    if summary is None:
        raise NotFoundError(f"Employee {user_id} not found", {"userId": user_id})
    return summary


def cmd_preview(args: argparse.Namespace) -> None:
    preview = preview_from_args(args)
    if args.json:
        print(PayrollPreviewOut.from_domain(preview).to_json())
    else:
        print(format_preview(preview))


def cmd_breakdown(args: argparse.Namespace) -> None:
    preview = preview_from_args(args)
    print(format_breakdown(find_summary(preview, args.employee)))


def cmd_export(args: argparse.Namespace) -> None:
    preview = preview_from_args(args)
    path = Path(args.path)
    if args.daily:
        export_daily_breakdown(path, find_summary(preview, args.daily))
    else:
        export_summaries(path, preview.employees)
    print(f"Exported payroll preview {preview.month} to {path}")


def existing_leaves_from_args(args: argparse.Namespace) -> List[LeaveRequest]:
    if not args.roster:
        return []
    if not args.employee:
        raise ValidationError("--employee is required with --roster", {"roster": args.roster})
    for records in load_roster(Path(args.roster)).to_domain():
        if records.employee.user_id == args.employee:
            return list(records.leaves)
    raise NotFoundError(f"Employee {args.employee} not found", {"userId": args.employee})


def cmd_check_leave(args: argparse.Namespace) -> None:
    request = validate_leave_request(
        {"startDate": args.start, "endDate": args.end, "type": args.type.upper(), "reason": args.reason},
        existing=existing_leaves_from_args(args),
    )
    print(f"Valid {request.type.value} leave {request.start_date} - {request.end_date} ({request.days} days)")


def add_period_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--month", help="Month to preview as YYYY-MM (defaults to the input file, then the current month)")
    parser.add_argument("--timezone", help="Timezone label (defaults to APP_TIMEZONE)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monthly payroll preview from exported time sessions and leaves")
    sub = parser.add_subparsers(dest="command", required=True)

    preview = sub.add_parser("preview", help="Summarise every employee for a month")
    preview.add_argument("input", help="Roster JSON file")
    preview.add_argument("--json", action="store_true", help="Print the preview as JSON")
    add_period_arguments(preview)
    preview.set_defaults(func=cmd_preview)

    breakdown = sub.add_parser("breakdown", help="Render one employee's daily breakdown")
    breakdown.add_argument("input")
    breakdown.add_argument("employee", help="User id of the employee")
    add_period_arguments(breakdown)
    breakdown.set_defaults(func=cmd_breakdown)

    export = sub.add_parser("export", help="Export the preview to CSV")
    export.add_argument("input")
    export.add_argument("path")
    export.add_argument("--daily", metavar="EMPLOYEE", help="Export one employee's daily breakdown instead")
    add_period_arguments(export)
    export.set_defaults(func=cmd_export)

    check_leave = sub.add_parser("check-leave", help="Validate a leave request")
    check_leave.add_argument("start")
    check_leave.add_argument("end")
    check_leave.add_argument("type", help="VACATION, SICK, PERSONAL, UNPAID, MATERNITY, PATERNITY or OTHER")
    check_leave.add_argument("--reason")
    check_leave.add_argument("--roster", help="Roster JSON file holding the employee's existing leaves")
    check_leave.add_argument("--employee", help="User id whose approved leaves must not overlap")
    check_leave.set_defaults(func=cmd_check_leave)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(args)
    configure_logging(settings.log_level, settings.log_format)
    try:
        args.func(args)
    except PayrollPreviewError as exc:
        logger.warning("command_failed", command=args.command, **exc.to_dict())
        print(f"error: {exc.code}: {exc.message}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
