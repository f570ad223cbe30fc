"""Attendance aggregation: raw records + working days -> AttendanceStats."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, Optional

from ..common.datetime_utils import DateLike, to_date
from ..common.money import round2, safe_pct, safe_ratio
from ..holidays.resolver import OffDays, resolve_working_days
from ..working_hours.model import WorkingHoursConfig
from .model import AttendanceRecord, AttendanceStats
from .punctuality import is_early_departure, is_late, validate_record


def index_by_date(records: Iterable[AttendanceRecord]) -> Dict[date, AttendanceRecord]:
    """Map work_date -> record. On duplicate dates the record supplied last wins."""
    by_date: Dict[date, AttendanceRecord] = {}
    for record in records:
        by_date[record.work_date] = validate_record(record)
    return by_date


def aggregate(
    records: Iterable[AttendanceRecord],
    start: DateLike,
    end: DateLike,
    config: WorkingHoursConfig,
    holiday_dates: Iterable[DateLike] = (),
    weekly_off_day: Optional[OffDays] = None,
) -> AttendanceStats:
    """Classify every working day of [start, end] as present or absent.

    ``weekly_off_day=None`` takes the off-days from ``config.work_days``.
    A working day without a present record counts as absent, including days
    that simply have no record yet; callers should only ask for past ranges.
    """
    start_d, end_d = to_date(start), to_date(end)
    off = config.off_days if weekly_off_day is None else weekly_off_day
    working_days = resolve_working_days(start_d, end_d, off, holiday_dates)
    by_date = index_by_date(r for r in records if start_d <= r.work_date <= end_d)

    present = absent = late = early = unrecorded = 0
    total_hours = total_overtime = 0.0
    break_minutes = 0

    for day in working_days:
        record = by_date.get(day)
        if record is None or not record.is_present:
            absent += 1
            if record is None:
                unrecorded += 1
            continue

        present += 1
        total_hours += float(record.hours_worked or 0)
        total_overtime += float(record.overtime_hours or 0)
        if is_late(record, config):
            late += 1
        if is_early_departure(record, config):
            early += 1
        break_minutes += config.break_minutes

    return AttendanceStats(
        start_date=start_d,
        end_date=end_d,
        working_days=len(working_days),
        present_days=present,
        absent_days=absent,
        late_days=late,
        early_departures=early,
        total_hours=round2(total_hours),
        total_overtime_hours=round2(total_overtime),
        avg_hours_per_day=round2(safe_ratio(total_hours, present)),
        total_break_hours=round2(break_minutes / 60.0),
        attendance_rate_pct=round2(safe_pct(present, len(working_days))),
        punctuality_rate_pct=round2(safe_pct(present - late, present)),
        on_time_ratio_pct=round2(safe_pct(present - late - early, present)),
        overtime_ratio_pct=round2(safe_pct(total_overtime, total_hours)),
        unrecorded_days=unrecorded,
    )
