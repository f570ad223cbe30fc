from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import DateLike, to_date
from ..common.money import round2
from ..core.enums import AttendanceStatus
from .model import Employee, ReportData

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "user_id",
    "name",
    "email",
    "department",
    "position",
    "total_days",
    "total_hours",
    "total_overtime_hours",
    "present_days",
    "absent_days",
    "late_days",
    "on_leave_days",
]


class EmployeeReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_employee_report(self, employees: Iterable[Employee], *, start: DateLike, end: DateLike) -> ReportData:
        start_d, end_d = to_date(start), to_date(end)
        rows: list[dict] = []

        for emp in employees:
            records = self._attendance.list_for_user(emp.user_id, start_date=start_d, end_date=end_d)
            records = [r for r in records if start_d <= r.work_date <= end_d]

            by_status = {status: 0 for status in AttendanceStatus}
            total_hours = total_overtime = 0.0
            for r in records:
                by_status[r.status] += 1
                total_hours += float(r.hours_worked or 0)
                total_overtime += float(r.overtime_hours or 0)

            rows.append(
                {
                    "user_id": emp.user_id,
                    "name": emp.name,
                    "email": emp.email,
                    "department": emp.department or "-",
                    "position": emp.position or "-",
                    "total_days": len(records),
                    "total_hours": round2(total_hours),
                    "total_overtime_hours": round2(total_overtime),
                    "present_days": by_status[AttendanceStatus.PRESENT],
                    "absent_days": by_status[AttendanceStatus.ABSENT],
                    "late_days": by_status[AttendanceStatus.LATE],
                    "on_leave_days": by_status[AttendanceStatus.ON_LEAVE],
                }
            )

        summary = [{"user_id": r["user_id"], "name": r["name"], "total_hours": r["total_hours"]} for r in rows]
        summary.sort(key=lambda x: x["total_hours"], reverse=True)
        logger.debug("Employee report %s..%s: %d employees", start_d, end_d, len(rows))
        return ReportData(rows=rows, summary=summary)


def to_dataframe(report: ReportData) -> pd.DataFrame:
    """Report rows as a DataFrame (one row per employee, REPORT_COLUMNS order)."""
    return pd.DataFrame(report.rows, columns=REPORT_COLUMNS)
