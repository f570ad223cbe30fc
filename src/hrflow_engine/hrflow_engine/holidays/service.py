from __future__ import annotations

import logging
from datetime import date
from typing import FrozenSet, List, Optional

from ..common.datetime_utils import DateLike, to_date
from ..core.constants import DEFAULT_WEEKLY_OFF_DAY
from .repository import HolidayRepository
from .resolver import OffDays, active_holiday_dates, month_working_days, resolve_working_days

logger = logging.getLogger(__name__)


class HolidayCalendarService:
    """Resolves working days against the holiday calendar kept by the caller."""

    def __init__(self, holidays: HolidayRepository, *, weekly_off_day: OffDays = DEFAULT_WEEKLY_OFF_DAY):
        self._holidays = holidays
        self._weekly_off_day = weekly_off_day

    @property
    def weekly_off_day(self) -> OffDays:
        return self._weekly_off_day

    def holiday_dates(self, *, year: Optional[int] = None, month: Optional[int] = None) -> FrozenSet[date]:
        return active_holiday_dates(self._holidays.list_all(), year=year, month=month)

    def is_holiday(self, day: DateLike) -> bool:
        d = to_date(day)
        return d in self.holiday_dates(year=d.year, month=d.month)

    def working_days(self, start: DateLike, end: DateLike, *, weekly_off_day: Optional[OffDays] = None) -> List[date]:
        off = self._weekly_off_day if weekly_off_day is None else weekly_off_day
        days = resolve_working_days(start, end, off, self.holiday_dates())
        logger.debug("Resolved %d working days between %s and %s", len(days), start, end)
        return days

    def month_working_days(self, year: int, month: int, *, weekly_off_day: Optional[OffDays] = None) -> List[date]:
        off = self._weekly_off_day if weekly_off_day is None else weekly_off_day
        return month_working_days(year, month, off, self.holiday_dates(year=year, month=month))
