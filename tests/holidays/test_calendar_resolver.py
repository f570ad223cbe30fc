from __future__ import annotations

from datetime import date

import pytest

from hrflow_engine.core.exceptions import InvalidInputError
from hrflow_engine.holidays.model import Holiday
from hrflow_engine.holidays.resolver import active_holiday_dates, month_working_days, resolve_working_days
from hrflow_engine.holidays.service import HolidayCalendarService


class InMemoryHolidays:
    def __init__(self, holidays):
        self._holidays = list(holidays)

    def list_all(self):
        return list(self._holidays)


def test_monday_is_skipped_and_range_is_inclusive():
    # 2026-09-01 is a Tuesday, 2026-09-07 a Monday
    days = resolve_working_days(date(2026, 9, 1), date(2026, 9, 7), 1)

    assert days == [date(2026, 9, d) for d in range(1, 7)]


def test_holiday_given_as_iso_string_is_excluded():
    days = resolve_working_days(date(2026, 9, 1), date(2026, 9, 3), 1, ["2026-09-02"])

    assert days == [date(2026, 9, 1), date(2026, 9, 3)]


def test_reversed_range_is_empty():
    assert resolve_working_days(date(2026, 9, 7), date(2026, 9, 1), 1) == []


def test_several_off_days():
    days = resolve_working_days(date(2026, 9, 1), date(2026, 9, 7), {0, 6})

    assert date(2026, 9, 5) not in days  # Saturday
    assert date(2026, 9, 6) not in days  # Sunday
    assert len(days) == 5


def test_invalid_weekday_index_raises():
    with pytest.raises(InvalidInputError):
        resolve_working_days(date(2026, 9, 1), date(2026, 9, 7), 7)


def test_month_with_four_mondays_has_26_working_days():
    assert len(month_working_days(2026, 9, 1)) == 26


def test_active_holiday_dates_filters_inactive_and_month():
    holidays = [
        Holiday(date=date(2026, 9, 2), name="Founders day"),
        Holiday(date=date(2026, 9, 3), name="Cancelled", is_active=False),
        Holiday(date=date(2026, 10, 1), name="Other month"),
    ]

    assert active_holiday_dates(holidays, year=2026, month=9) == {date(2026, 9, 2)}
    assert active_holiday_dates(holidays) == {date(2026, 9, 2), date(2026, 10, 1)}


def test_service_uses_configured_off_day_and_active_holidays():
    svc = HolidayCalendarService(
        InMemoryHolidays([Holiday(date=date(2026, 9, 2), name="Holiday")]),
        weekly_off_day=0,
    )

    days = svc.working_days(date(2026, 9, 1), date(2026, 9, 7))

    assert date(2026, 9, 2) not in days
    assert date(2026, 9, 6) not in days  # Sunday
    assert date(2026, 9, 7) in days  # Monday works here
    assert svc.is_holiday("2026-09-02")
    assert len(svc.month_working_days(2026, 9)) == 30 - 4 - 1
