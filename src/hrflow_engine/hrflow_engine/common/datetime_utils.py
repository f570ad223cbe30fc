from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, time, timedelta
from typing import Iterator, Tuple, Union

from ..core.exceptions import InvalidInputError

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: DateLike) -> date:
    """Accept a date (or datetime) or an ISO string and return a plain date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date: {value!r}") from exc


def parse_hhmm(value: Union[str, time]) -> time:
    """Parse a local 'HH:MM' wall-clock string."""
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except (AttributeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid time (expected HH:MM): {value!r}") from exc


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def weekday_index(day: date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive; nothing if start > end."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    first = date(year, month, 1)
    last = date(year, month, monthrange(year, month)[1])
    return first, last


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600.0


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def wall_clock(moment: datetime) -> datetime:
    """Local wall-clock reading of a timestamp (drops tzinfo, keeps the local time)."""
    return moment.replace(tzinfo=None)
