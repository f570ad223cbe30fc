from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_negative, require_weekday_index
from ..core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_EARLIEST_CHECK_IN,
    DEFAULT_LATEST_CHECK_OUT,
    DEFAULT_SHIFT_NAME,
    DEFAULT_WORK_DAYS,
)


def parse_work_days(value: Union[str, Iterable[int]]) -> FrozenSet[int]:
    """Accept "2,3,4,5,6,0" or any iterable of weekday indices (0=Sunday)."""
    if isinstance(value, str):
        value = [int(part) for part in value.split(",") if part.strip()]
    return frozenset(require_weekday_index(int(d), "work_days") for d in value)


@dataclass(frozen=True)
class WorkingHoursConfig:
    """Domain entity: the working-hours configuration (a shift pattern).

    ``user_id=None`` marks the global default; a row with a user_id overrides it
    for that user. ``end_time <= start_time`` describes an overnight shift.
    """

    start_time: time
    end_time: time
    break_minutes: int = DEFAULT_BREAK_MINUTES
    work_days: FrozenSet[int] = field(default_factory=lambda: frozenset(DEFAULT_WORK_DAYS))
    is_active: bool = True
    user_id: Optional[int] = None
    shift_name: str = DEFAULT_SHIFT_NAME
    earliest_check_in: time = field(default_factory=lambda: parse_hhmm(DEFAULT_EARLIEST_CHECK_IN))
    latest_check_out: time = field(default_factory=lambda: parse_hhmm(DEFAULT_LATEST_CHECK_OUT))

    def __post_init__(self) -> None:
        require_non_negative(self.break_minutes, "break_minutes")
        object.__setattr__(self, "work_days", parse_work_days(self.work_days))

    @classmethod
    def from_strings(
        cls,
        start_time: str,
        end_time: str,
        *,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
        work_days: Union[str, Iterable[int]] = DEFAULT_WORK_DAYS,
        is_active: bool = True,
        user_id: Optional[int] = None,
        shift_name: str = DEFAULT_SHIFT_NAME,
        earliest_check_in: str = DEFAULT_EARLIEST_CHECK_IN,
        latest_check_out: str = DEFAULT_LATEST_CHECK_OUT,
    ) -> "WorkingHoursConfig":
        return cls(
            start_time=parse_hhmm(start_time),
            end_time=parse_hhmm(end_time),
            break_minutes=int(break_minutes),
            work_days=parse_work_days(work_days),
            is_active=bool(is_active),
            user_id=user_id,
            shift_name=shift_name,
            earliest_check_in=parse_hhmm(earliest_check_in),
            latest_check_out=parse_hhmm(latest_check_out),
        )

    @property
    def is_overnight(self) -> bool:
        return self.end_time <= self.start_time

    @property
    def off_days(self) -> FrozenSet[int]:
        return frozenset(range(7)) - self.work_days

    def shift_window(self, work_date: date) -> Tuple[datetime, datetime]:
        """Start and end of the shift that begins on work_date."""
        start = datetime.combine(work_date, self.start_time)
        end = datetime.combine(work_date, self.end_time)
        if self.is_overnight:
            end += timedelta(days=1)
        return start, end
