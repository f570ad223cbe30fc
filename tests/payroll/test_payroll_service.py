from __future__ import annotations

from datetime import date, datetime

import pytest

from hrflow_engine.attendance.model import AttendanceRecord
from hrflow_engine.holidays.model import Holiday
from hrflow_engine.payroll.service import PayrollService
from hrflow_engine.working_hours.model import WorkingHoursConfig
from hrflow_engine.working_hours.service import WorkingHoursService


class FakeAttendanceRepo:
    def __init__(self, records):
        self._records = records
        self.last_args = None

    def list_for_user(self, user_id, *, start_date, end_date):
        self.last_args = {"user_id": user_id, "start_date": start_date, "end_date": end_date}
        return [r for r in self._records if r.user_id == user_id]


class FakeHolidays:
    def __init__(self, holidays):
        self._holidays = holidays

    def list_all(self):
        return self._holidays


class FakeWorkingHours:
    def __init__(self, configs):
        self._configs = configs

    def list_all(self):
        return self._configs


def _record(user_id, d):
    return AttendanceRecord(
        user_id=user_id,
        work_date=d,
        check_in=datetime(d.year, d.month, d.day, 9, 0),
        check_out=datetime(d.year, d.month, d.day, 17, 0),
        hours_worked=7.0,
    )


def test_service_loads_the_month_and_user_schedule():
    repo = FakeAttendanceRepo([_record(5, date(2026, 9, 1)), _record(6, date(2026, 9, 1))])
    user_cfg = WorkingHoursConfig.from_strings("09:00", "17:00", break_minutes=60, user_id=5)
    svc = PayrollService(
        repo,
        FakeHolidays([Holiday(date=date(2026, 9, 2), name="Holiday")]),
        WorkingHoursService(FakeWorkingHours([user_cfg])),
    )

    result = svc.calculate_for_user(5, month=9, year=2026, base_salary=3000)

    assert repo.last_args == {"user_id": 5, "start_date": date(2026, 9, 1), "end_date": date(2026, 9, 30)}
    assert result.standard_daily_hours == 7.0
    assert result.expected_working_days == 25
    assert result.present_days == 1
    assert result.bonus_hours == 0.5


def test_service_uses_default_overtime_multiplier():
    d = date(2026, 9, 1)
    record = AttendanceRecord(
        user_id=1,
        work_date=d,
        check_in=datetime(2026, 9, 1, 9, 30),
        check_out=datetime(2026, 9, 1, 19, 0),
        hours_worked=8.5,
        overtime_hours=2.0,
    )
    svc = PayrollService(
        FakeAttendanceRepo([record]),
        FakeHolidays([]),
        WorkingHoursService(FakeWorkingHours([])),
        default_overtime_multiplier=2.0,
    )

    default = svc.calculate_for_user(1, month=9, year=2026, base_salary=5000)
    explicit = svc.calculate_for_user(1, month=9, year=2026, base_salary=5000, overtime_multiplier=1.0)

    assert default.overtime_pay == pytest.approx(2.0 * 2.0 * 5000 / 169, abs=0.005)
    assert explicit.overtime_pay == pytest.approx(2.0 * 1.0 * 5000 / 169, abs=0.005)
