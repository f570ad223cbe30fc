"""Rules derived from a working-hours configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..common.datetime_utils import format_hhmm, weekday_index
from ..core.constants import (
    DAYS_OF_WEEK,
    DEFAULT_BREAK_MINUTES,
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    DEFAULT_WORK_DAYS,
)
from ..core.enums import WorkingStatus
from ..core.exceptions import InvalidInputError
from .model import WorkingHoursConfig

DEFAULT_WORKING_HOURS = WorkingHoursConfig.from_strings(
    DEFAULT_START_TIME,
    DEFAULT_END_TIME,
    break_minutes=DEFAULT_BREAK_MINUTES,
    work_days=DEFAULT_WORK_DAYS,
)


@dataclass(frozen=True)
class WorkingStatusInfo:
    status: WorkingStatus
    message: str
    can_check_in: bool


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def shift_minutes(config: WorkingHoursConfig) -> int:
    """Shift length in minutes, wrapping midnight when end <= start."""
    minutes = _minutes(config.end_time) - _minutes(config.start_time)
    if config.is_overnight:
        minutes += 24 * 60
    return minutes


def standard_daily_hours(config: WorkingHoursConfig) -> float:
    """Shift duration minus the break, in hours."""
    minutes = shift_minutes(config) - config.break_minutes
    if minutes < 0:
        raise InvalidInputError(
            f"Break of {config.break_minutes} minutes is longer than the "
            f"{format_hhmm(config.start_time)}-{format_hhmm(config.end_time)} shift"
        )
    return minutes / 60.0


def resolve_working_hours(configs: Iterable[WorkingHoursConfig], user_id: Optional[int] = None) -> WorkingHoursConfig:
    """Pick the authoritative configuration.

    An active per-user override wins over the active global default; with
    neither, the built-in default schedule applies.
    """
    active = [c for c in configs if c.is_active]
    if user_id is not None:
        for c in active:
            if c.user_id == user_id:
                return c
    for c in active:
        if c.user_id is None:
            return c
    return DEFAULT_WORKING_HOURS


def is_working_day(day: date, config: WorkingHoursConfig = DEFAULT_WORKING_HOURS) -> bool:
    return weekday_index(day) in config.work_days


def is_working_hours(moment: datetime, config: WorkingHoursConfig = DEFAULT_WORKING_HOURS) -> bool:
    """Inclusive at both ends, minute resolution."""
    now = _minutes(moment.time())
    start, end = _minutes(config.start_time), _minutes(config.end_time)
    if config.is_overnight:
        return now >= start or now <= end
    return start <= now <= end


def within_check_in_window(moment: datetime, config: WorkingHoursConfig) -> bool:
    """Whether moment lies between earliest_check_in and latest_check_out."""
    now = _minutes(moment.time())
    earliest, latest = _minutes(config.earliest_check_in), _minutes(config.latest_check_out)
    if earliest <= latest:
        return earliest <= now <= latest
    return now >= earliest or now <= latest


def get_working_status(moment: datetime, config: WorkingHoursConfig = DEFAULT_WORKING_HOURS) -> WorkingStatusInfo:
    if not is_working_day(moment.date(), config):
        return WorkingStatusInfo(WorkingStatus.OFF_DAY, "Today is an off day", False)

    if is_working_hours(moment, config):
        return WorkingStatusInfo(WorkingStatus.WORKING_HOURS, "Currently in working hours", True)

    if config.is_overnight or _minutes(moment.time()) < _minutes(config.start_time):
        return WorkingStatusInfo(
            WorkingStatus.BEFORE_HOURS, f"Work starts at {format_hhmm(config.start_time)}", False
        )
    return WorkingStatusInfo(WorkingStatus.AFTER_HOURS, f"Work ended at {format_hhmm(config.end_time)}", False)


def format_working_hours(config: WorkingHoursConfig) -> str:
    # Monday-first week, Sunday last.
    ordered = sorted(config.work_days, key=lambda d: (d == 0, d))
    names = ", ".join(DAYS_OF_WEEK[d] for d in ordered)
    return f"{format_hhmm(config.start_time)} - {format_hhmm(config.end_time)}, {names}"
