from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..common.datetime_utils import hours_between, wall_clock
from ..core.exceptions import MalformedRecordError
from ..working_hours.model import WorkingHoursConfig
from .model import AttendanceRecord


def validate_record(record: AttendanceRecord) -> AttendanceRecord:
    if record.check_in and record.check_out and record.check_out < record.check_in:
        raise MalformedRecordError(
            f"Record for user {record.user_id} on {record.work_date}: "
            f"check-out {record.check_out.isoformat()} precedes check-in {record.check_in.isoformat()}"
        )
    return record


def validate_records(records: Iterable[AttendanceRecord]) -> None:
    for record in records:
        validate_record(record)


def is_late(record: AttendanceRecord, config: WorkingHoursConfig) -> bool:
    """Check-in later than the shift start on the record's date."""
    if not record.check_in:
        return False
    shift_start, _ = config.shift_window(record.work_date)
    return wall_clock(record.check_in) > shift_start


def is_early_departure(record: AttendanceRecord, config: WorkingHoursConfig) -> bool:
    """Check-out before the shift end (the next morning for overnight shifts)."""
    if not record.check_out:
        return False
    _, shift_end = config.shift_window(record.work_date)
    return wall_clock(record.check_out) < shift_end


def worked_hours(check_in: datetime, check_out: datetime, break_minutes: int) -> float:
    """(out - in) - break, not below 0."""
    return max(hours_between(check_in, check_out) - break_minutes / 60.0, 0.0)
