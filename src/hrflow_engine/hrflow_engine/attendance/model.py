from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one user's attendance for one date.

    hours_worked and overtime_hours are decimal hours as stored at check-out.
    """

    user_id: int
    work_date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    hours_worked: float = 0.0
    overtime_hours: float = 0.0
    location: Optional[str] = None
    attendance_id: Optional[int] = None
    notes: Optional[str] = None

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT


@dataclass(frozen=True)
class AttendanceStats:
    """Aggregated attendance for a date range (derived, never persisted here)."""

    start_date: date
    end_date: date
    working_days: int
    present_days: int
    absent_days: int
    late_days: int
    early_departures: int
    total_hours: float
    total_overtime_hours: float
    avg_hours_per_day: float
    total_break_hours: float
    attendance_rate_pct: float
    punctuality_rate_pct: float
    on_time_ratio_pct: float
    overtime_ratio_pct: float
    # Working days with no record at all; already counted in absent_days.
    unrecorded_days: int = 0
