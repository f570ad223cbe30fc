from __future__ import annotations

from datetime import date, datetime

import pytest

from hrflow_engine.attendance.model import AttendanceRecord
from hrflow_engine.core.enums import AttendanceStatus
from hrflow_engine.core.exceptions import DivisionUndefinedError, InvalidInputError, MalformedRecordError
from hrflow_engine.holidays.model import Holiday
from hrflow_engine.holidays.resolver import month_working_days
from hrflow_engine.payroll.calculator.standard_calculator import StandardPayrollCalculator, calculate_payroll
from hrflow_engine.payroll.model import PayrollPolicy
from hrflow_engine.working_hours.model import WorkingHoursConfig

SEPT_WORKING_DAYS = month_working_days(2026, 9, 1)  # 26 days, Mondays off
HOURLY = 5000 / (26 * 6.5)


def _day(d: date, *, hours: float = 6.5, check_in: str = "09:30", overtime: float = 0.0, status=AttendanceStatus.PRESENT):
    h, m = map(int, check_in.split(":"))
    return AttendanceRecord(
        user_id=1,
        work_date=d,
        check_in=datetime(d.year, d.month, d.day, h, m),
        check_out=datetime(d.year, d.month, d.day, 17, 0),
        status=status,
        hours_worked=hours,
        overtime_hours=overtime,
    )


def _run(records, config, **kwargs):
    params = dict(base_salary=5000, overtime_multiplier=1.5, month=9, year=2026, config=config, holidays=[])
    params.update(kwargs)
    return calculate_payroll(records, **params)


def test_scenario_24_of_26_days_present(standard_config):
    records = [_day(d) for d in SEPT_WORKING_DAYS[:24]]

    result = _run(records, standard_config)

    assert result.standard_daily_hours == 6.5
    assert result.expected_working_days == 26
    assert result.present_days == 24
    assert result.absent_days == 2
    assert result.attendance_rate_pct == 92.31
    assert result.attendance_bonus == 0.0
    assert result.expected_hours == 169.0
    assert result.hourly_rate == 29.59
    assert result.regular_hours == 156.0
    assert result.bonus_hours == 12.0
    assert result.late_days == 0
    assert result.absent_penalty == pytest.approx(2 * HOURLY * 6.5, abs=0.005)

    gross = 156 * HOURLY + 12 * HOURLY * 1.2 - 2 * HOURLY * 6.5
    assert result.gross_salary == pytest.approx(gross, abs=0.005)
    assert result.income_tax == pytest.approx(gross * 0.10, abs=0.005)
    assert result.health_insurance == 150.0
    assert result.net_salary == pytest.approx(gross * (1 - 0.10 - 0.062 - 0.0145 - 0.12) - 150, abs=0.005)
    assert result.net_salary == 3126.06


def test_result_is_deterministic(standard_config):
    records = [_day(d) for d in SEPT_WORKING_DAYS[:24]]

    assert _run(records, standard_config) == _run(records, standard_config)


def test_full_attendance_earns_attendance_bonus(standard_config):
    result = _run([_day(d) for d in SEPT_WORKING_DAYS], standard_config)

    assert result.attendance_rate_pct == 100.0
    assert result.attendance_bonus == 250.0
    assert result.regular_pay == 5000.0


def test_late_full_day_is_penalized_instead_of_rewarded(standard_config):
    records = [_day(SEPT_WORKING_DAYS[0], check_in="09:45")]

    result = _run(records, standard_config)

    assert result.late_days == 1
    assert result.bonus_hours == 0.0
    assert result.late_penalty == pytest.approx(HOURLY * 0.5, abs=0.005)


def test_short_day_is_neither_bonus_nor_late(standard_config):
    result = _run([_day(SEPT_WORKING_DAYS[0], hours=4.0, check_in="11:00")], standard_config)

    assert result.late_days == 0
    assert result.bonus_hours == 0.0
    assert result.regular_hours == 4.0


def test_overtime_paid_at_multiplier(standard_config):
    result = _run([_day(SEPT_WORKING_DAYS[0], hours=8.5, overtime=2.0)], standard_config, overtime_multiplier=2.0)

    assert result.regular_hours == 6.5
    assert result.total_hours == 8.5
    assert result.overtime_pay == pytest.approx(2.0 * HOURLY * 2.0, abs=0.005)


def test_gross_may_be_negative(standard_config):
    result = _run([], standard_config)

    assert result.absent_days == 26
    assert result.gross_salary == -5000.0
    assert result.net_salary == -3667.5


def test_high_earner_taxed_at_upper_rate(standard_config):
    result = _run([_day(d) for d in SEPT_WORKING_DAYS], standard_config, base_salary=200000)

    assert result.gross_salary > 50000
    assert result.income_tax == pytest.approx(result.gross_salary * 0.15, abs=0.01)


def test_records_outside_month_and_non_present_are_ignored(standard_config):
    records = [
        _day(date(2026, 8, 30)),
        _day(date(2026, 10, 1)),
        _day(SEPT_WORKING_DAYS[0], status=AttendanceStatus.ON_LEAVE),
    ]

    result = _run(records, standard_config)

    assert result.present_days == 0
    assert result.total_hours == 0.0


def test_total_hours_matches_sum_of_present_records(standard_config):
    records = [_day(d, hours=h) for d, h in zip(SEPT_WORKING_DAYS, [6.5, 7.25, 3.0, 8.0, 5.5])]
    records.append(_day(SEPT_WORKING_DAYS[6], hours=9.0, status=AttendanceStatus.ABSENT))

    result = _run(records, standard_config)

    assert result.total_hours == 6.5 + 7.25 + 3.0 + 8.0 + 5.5


def test_more_regular_hours_never_lowers_net(standard_config):
    base = [_day(d) for d in SEPT_WORKING_DAYS[:20]]
    shorter = _run(base + [_day(SEPT_WORKING_DAYS[20], hours=4.0)], standard_config)
    longer = _run(base + [_day(SEPT_WORKING_DAYS[20], hours=6.0)], standard_config)

    assert longer.regular_hours > shorter.regular_hours
    assert longer.net_salary >= shorter.net_salary


def test_non_positive_base_salary_is_invalid(standard_config):
    with pytest.raises(InvalidInputError):
        _run([], standard_config, base_salary=0)
    with pytest.raises(InvalidInputError):
        _run([], standard_config, base_salary=-10)


def test_invalid_month_and_multiplier(standard_config):
    with pytest.raises(InvalidInputError):
        _run([], standard_config, month=13)
    with pytest.raises(InvalidInputError):
        _run([], standard_config, overtime_multiplier=-1)


def test_month_without_working_days_is_undefined():
    mondays_only = WorkingHoursConfig.from_strings("09:30", "17:00", work_days=[1])
    holidays = [Holiday(date=date(2026, 9, d), name="Closed") for d in (7, 14, 21, 28)]

    with pytest.raises(DivisionUndefinedError):
        _run([], mondays_only, holidays=holidays)


def test_empty_work_week_is_undefined():
    no_days = WorkingHoursConfig.from_strings("09:30", "17:00", work_days=[])

    with pytest.raises(DivisionUndefinedError):
        _run([], no_days)


def test_inactive_holiday_still_counts_as_working_day(standard_config):
    holidays = [Holiday(date=SEPT_WORKING_DAYS[0], name="Cancelled", is_active=False)]

    result = _run([], standard_config, holidays=holidays)

    assert result.expected_working_days == 26


def test_custom_policy():
    calc = StandardPayrollCalculator(PayrollPolicy(health_insurance_amount=0.0, provident_fund_rate=0.0))
    cfg = WorkingHoursConfig.from_strings("09:30", "17:00", break_minutes=60)

    result = calc.calculate(
        [_day(d) for d in SEPT_WORKING_DAYS],
        base_salary=5000,
        overtime_multiplier=1.5,
        month=9,
        year=2026,
        config=cfg,
    )

    assert result.health_insurance == 0.0
    assert result.provident_fund == 0.0
    assert result.as_dict()["deductions"]["total_deductions"] == result.total_deductions


def test_malformed_record_in_month_is_rejected(standard_config):
    day = SEPT_WORKING_DAYS[0]
    bad = AttendanceRecord(
        user_id=1,
        work_date=day,
        check_in=datetime(day.year, day.month, day.day, 17, 0),
        check_out=datetime(day.year, day.month, day.day, 9, 0),
        status=AttendanceStatus.PRESENT,
        hours_worked=6.5,
    )

    with pytest.raises(MalformedRecordError):
        _run([_day(SEPT_WORKING_DAYS[1]), bad], standard_config)
