from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService, AttendanceStatsService
from .config import load_settings
from .core.constants import DEFAULT_OVERTIME_MULTIPLIER, DEFAULT_WEEKLY_OFF_DAY
from .geofence.repository import CheckinZoneRepository
from .geofence.service import GeofenceService
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayCalendarService
from .payroll.model import PayrollPolicy
from .payroll.service import PayrollService
from .reports.service import EmployeeReportService
from .working_hours.repository import WorkingHoursRepository
from .working_hours.service import WorkingHoursService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    holidays_repo: HolidayRepository
    working_hours_repo: WorkingHoursRepository
    zones_repo: CheckinZoneRepository

    calendar_service: HolidayCalendarService
    working_hours_service: WorkingHoursService
    geofence_service: GeofenceService
    attendance_service: AttendanceService
    attendance_stats_service: AttendanceStatsService
    payroll_service: PayrollService
    report_service: EmployeeReportService


def build_container(
    *,
    attendance_repo: AttendanceRepository,
    holidays_repo: HolidayRepository,
    working_hours_repo: WorkingHoursRepository,
    zones_repo: CheckinZoneRepository,
    settings: Optional[ModuleType] = None,
) -> Container:
    """Wire the services around the caller's repositories.

    ``settings`` defaults to the module selected by APP_ENV.
    """
    settings = settings or load_settings()

    weekly_off_day = int(getattr(settings, "WEEKLY_OFF_DAY", DEFAULT_WEEKLY_OFF_DAY))
    overtime_multiplier = float(getattr(settings, "DEFAULT_OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER))
    policy = PayrollPolicy(**dict(getattr(settings, "PAYROLL_POLICY", {}) or {}))

    calendar_service = HolidayCalendarService(holidays_repo, weekly_off_day=weekly_off_day)
    working_hours_service = WorkingHoursService(working_hours_repo)
    geofence_service = GeofenceService(zones_repo)
    attendance_service = AttendanceService(attendance_repo, working_hours_service, geofence_service)
    attendance_stats_service = AttendanceStatsService(attendance_repo, calendar_service, working_hours_service)
    payroll_service = PayrollService(
        attendance_repo,
        holidays_repo,
        working_hours_service,
        policy=policy,
        default_overtime_multiplier=overtime_multiplier,
    )
    report_service = EmployeeReportService(attendance_repo)

    return Container(
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        working_hours_repo=working_hours_repo,
        zones_repo=zones_repo,
        calendar_service=calendar_service,
        working_hours_service=working_hours_service,
        geofence_service=geofence_service,
        attendance_service=attendance_service,
        attendance_stats_service=attendance_stats_service,
        payroll_service=payroll_service,
        report_service=report_service,
    )
