"""Calendar resolver: which dates of a range are working days."""

from __future__ import annotations

from datetime import date
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Union

from ..common.datetime_utils import DateLike, iter_dates, month_bounds, to_date, weekday_index
from ..common.validators import require_between, require_weekday_index
from ..core.constants import DEFAULT_WEEKLY_OFF_DAY
from .model import Holiday

OffDays = Union[int, Iterable[int]]


def normalize_off_days(off_days: OffDays) -> FrozenSet[int]:
    if isinstance(off_days, int):
        return frozenset({require_weekday_index(off_days, "weekly_off_day")})
    return frozenset(require_weekday_index(d, "weekly_off_day") for d in off_days)


def normalize_holiday_dates(holiday_dates: Iterable[DateLike]) -> FrozenSet[date]:
    return frozenset(to_date(d) for d in holiday_dates)


def resolve_working_days(
    start: DateLike,
    end: DateLike,
    weekly_off_day: OffDays = DEFAULT_WEEKLY_OFF_DAY,
    holiday_dates: Iterable[DateLike] = (),
) -> List[date]:
    """Return the working days between start and end (both inclusive), ascending.

    A day is a working day when its weekday index (0=Sunday) is not an off-day
    and it is not listed in holiday_dates. ``weekly_off_day`` is a single index
    or a collection of indices. A reversed range (start > end) is treated as
    empty rather than as an error.
    """
    start_d, end_d = to_date(start), to_date(end)
    off = normalize_off_days(weekly_off_day)
    holidays = normalize_holiday_dates(holiday_dates)
    return [d for d in iter_dates(start_d, end_d) if weekday_index(d) not in off and d not in holidays]


def active_holiday_dates(
    holidays: Iterable[Holiday],
    *,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> FrozenSet[date]:
    """Dates of active holidays, optionally restricted to one year/month."""
    out = set()
    for h in holidays:
        if not h.is_active:
            continue
        d = to_date(h.date)
        if year is not None and d.year != year:
            continue
        if month is not None and d.month != month:
            continue
        out.add(d)
    return frozenset(out)


def month_working_days(
    year: int,
    month: int,
    weekly_off_day: OffDays = DEFAULT_WEEKLY_OFF_DAY,
    holiday_dates: AbstractSet[date] = frozenset(),
) -> List[date]:
    require_between(month, "month", 1, 12)
    first, last = month_bounds(year, month)
    return resolve_working_days(first, last, weekly_off_day, holiday_dates)
