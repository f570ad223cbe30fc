from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Record storage owned by the caller.

    Implementations must serialize writes per (user_id, work_date), e.g. with a
    unique constraint, so concurrent check-ins cannot create two records.
    """

    def list_for_user(self, user_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in: datetime,
        status: AttendanceStatus,
        location: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out: datetime,
        hours_worked: float,
        overtime_hours: float,
    ) -> bool:
        raise NotImplementedError
