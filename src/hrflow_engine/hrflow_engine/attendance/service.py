from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import DateLike, format_hhmm, now_local, to_date
from ..common.money import round2
from ..core.enums import AttendanceStatus
from ..core.exceptions import MalformedRecordError, ValidationError
from ..geofence.model import GeoPoint, ZoneMatch
from ..geofence.service import GeofenceService
from ..holidays.resolver import OffDays
from ..holidays.service import HolidayCalendarService
from ..working_hours.rules import is_working_day, standard_daily_hours, within_check_in_window
from ..working_hours.service import WorkingHoursService
from .aggregator import aggregate
from .model import AttendanceRecord, AttendanceStats
from .punctuality import worked_hours
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceStatsService:
    """Loads a user's records and aggregates them over a date range."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        calendar: HolidayCalendarService,
        working_hours: WorkingHoursService,
    ):
        self._attendance = attendance
        self._calendar = calendar
        self._working_hours = working_hours

    def stats_for_records(
        self,
        records: Iterable[AttendanceRecord],
        *,
        start: DateLike,
        end: DateLike,
        user_id: Optional[int] = None,
        weekly_off_day: Optional[OffDays] = None,
    ) -> AttendanceStats:
        """Aggregate ``records`` over the calendar's working days.

        Without an explicit ``weekly_off_day`` the calendar's configured
        off-day applies, so the result agrees with ``calendar.working_days``.
        """
        config = self._working_hours.for_user(user_id)
        off = self._calendar.weekly_off_day if weekly_off_day is None else weekly_off_day
        stats = aggregate(records, start, end, config, self._calendar.holiday_dates(), off)
        logger.debug(
            "Attendance %s..%s user=%s: %d/%d present, %d late",
            stats.start_date,
            stats.end_date,
            user_id,
            stats.present_days,
            stats.working_days,
            stats.late_days,
        )
        return stats

    def stats_for_user(
        self,
        user_id: int,
        *,
        start: DateLike,
        end: DateLike,
        weekly_off_day: Optional[OffDays] = None,
    ) -> AttendanceStats:
        start_d, end_d = to_date(start), to_date(end)
        records = self._attendance.list_for_user(user_id, start_date=start_d, end_date=end_d)
        return self.stats_for_records(records, start=start_d, end=end_d, user_id=user_id, weekly_off_day=weekly_off_day)


class AttendanceService:
    """Check-in / check-out actions gated by check-in zones and working hours.

    Uniqueness per (user_id, work_date) under concurrent calls is left to the
    repository.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        working_hours: WorkingHoursService,
        geofence: GeofenceService,
    ):
        self._attendance = attendance
        self._working_hours = working_hours
        self._geofence = geofence

    def _require_zone(self, user_id: int, point: GeoPoint, action: str) -> ZoneMatch:
        match = self._geofence.resolve(point)
        if not match.in_zone:
            logger.warning(
                "User %s %s rejected outside check-in zones at (%s, %s)",
                user_id,
                action,
                point.latitude,
                point.longitude,
            )
            raise ValidationError(f"You must be in a designated check-in zone to {action}")
        return match

    def check_in(self, user_id: int, point: GeoPoint, *, now: Optional[datetime] = None) -> int:
        now = now or now_local()
        today = now.date()

        match = self._require_zone(user_id, point, "check in")
        config = self._working_hours.for_user(user_id)
        if not is_working_day(today, config):
            raise ValidationError("Today is an off day")
        if not within_check_in_window(now, config):
            raise ValidationError(
                f"Check-in is allowed between {format_hhmm(config.earliest_check_in)} "
                f"and {format_hhmm(config.latest_check_out)}"
            )

        existing = self._attendance.get_for_user_and_date(user_id, today)
        if existing and existing.check_in:
            raise ValidationError("Already checked in today")

        attendance_id = self._attendance.create_checkin(
            user_id=user_id,
            work_date=today,
            check_in=now,
            status=AttendanceStatus.PRESENT,
            location=match.zone_name,
        )
        logger.info("User %s checked in at %s in %s (attendance id=%s)", user_id, now.isoformat(), match.zone_name, attendance_id)
        return attendance_id

    def _open_record(self, user_id: int, now: datetime, overnight: bool) -> Optional[AttendanceRecord]:
        record = self._attendance.get_for_user_and_date(user_id, now.date())
        if (record is None or not record.check_in) and overnight:
            # Overnight shifts are checked out on the day after they start.
            record = self._attendance.get_for_user_and_date(user_id, now.date() - timedelta(days=1))
        return record

    def check_out(self, user_id: int, point: GeoPoint, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()

        self._require_zone(user_id, point, "check out")
        config = self._working_hours.for_user(user_id)

        record = self._open_record(user_id, now, config.is_overnight)
        if not record or not record.check_in:
            raise ValidationError("Must check in first")
        if record.check_out is not None:
            raise ValidationError("Already checked out today")
        if now < record.check_in:
            raise MalformedRecordError(f"Check-out {now.isoformat()} precedes check-in {record.check_in.isoformat()}")

        hours = round2(worked_hours(record.check_in, now, config.break_minutes))
        overtime = round2(max(hours - standard_daily_hours(config), 0.0))

        self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out=now,
            hours_worked=hours,
            overtime_hours=overtime,
        )
        logger.info("User %s checked out at %s (attendance id=%s) worked: %s", user_id, now.isoformat(), record.attendance_id, hours)
        return replace(record, check_out=now, hours_worked=hours, overtime_hours=overtime)
