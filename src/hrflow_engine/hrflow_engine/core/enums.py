from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored on a record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    ON_LEAVE = "on_leave"


class WorkingStatus(str, Enum):
    """Where a moment falls relative to the configured working hours."""

    OFF_DAY = "off-day"
    BEFORE_HOURS = "before-hours"
    WORKING_HOURS = "working-hours"
    AFTER_HOURS = "after-hours"
