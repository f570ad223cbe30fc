from __future__ import annotations

from typing import Iterable, Optional

from ...attendance.aggregator import index_by_date
from ...attendance.model import AttendanceRecord
from ...attendance.punctuality import is_late
from ...common.datetime_utils import month_bounds
from ...common.money import round2
from ...common.validators import require_between, require_non_negative, require_positive
from ...core.exceptions import DivisionUndefinedError
from ...holidays.model import Holiday
from ...holidays.resolver import active_holiday_dates, month_working_days
from ...working_hours.model import WorkingHoursConfig
from ...working_hours.rules import standard_daily_hours
from ..model import DEFAULT_PAYROLL_POLICY, PayrollPolicy, PayrollResult
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hourly rate from the expected monthly hours, then bonuses,
    penalties and statutory deductions computed on the gross.

    Intermediate values keep full float precision; only the returned figures
    are rounded.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None):
        self._policy = policy or DEFAULT_PAYROLL_POLICY

    def calculate(
        self,
        records: Iterable[AttendanceRecord],
        *,
        base_salary: float,
        overtime_multiplier: float,
        month: int,
        year: int,
        config: WorkingHoursConfig,
        holidays: Iterable[Holiday] = (),
        policy: Optional[PayrollPolicy] = None,
    ) -> PayrollResult:
        p = policy or self._policy
        require_positive(base_salary, "base_salary")
        require_non_negative(overtime_multiplier, "overtime_multiplier")
        require_between(month, "month", 1, 12)

        daily = standard_daily_hours(config)
        holiday_dates = active_holiday_dates(holidays, year=year, month=month)
        working_days = month_working_days(year, month, config.off_days, holiday_dates)
        expected_days = len(working_days)
        if expected_days == 0:
            raise DivisionUndefinedError(f"No expected working days in {year}-{month:02d}; check the working-days setup")
        expected_hours = expected_days * daily
        if expected_hours <= 0:
            raise DivisionUndefinedError(f"Shift of {config.shift_name!r} has no working time after the break")
        hourly_rate = base_salary / expected_hours

        first, last = month_bounds(year, month)
        by_date = index_by_date(r for r in records if first <= r.work_date <= last)
        working_set = set(working_days)

        present = late = 0
        total_hours = regular_hours = overtime_hours = bonus_hours = 0.0
        for day in sorted(by_date):
            record = by_date[day]
            if not record.is_present:
                continue
            if day in working_set:
                present += 1

            daily_hours = float(record.hours_worked or 0)
            total_hours += daily_hours
            regular_hours += min(daily_hours, daily)
            overtime_hours += float(record.overtime_hours or 0)

            # Only full days are judged for punctuality.
            if daily_hours >= daily and record.check_in:
                if is_late(record, config):
                    late += 1
                else:
                    bonus_hours += p.punctuality_bonus_hours

        absent = expected_days - present
        attendance_rate = present / expected_days * 100.0

        regular_pay = regular_hours * hourly_rate
        overtime_pay = overtime_hours * hourly_rate * overtime_multiplier
        bonus_pay = bonus_hours * hourly_rate * p.punctuality_bonus_multiplier
        attendance_bonus = base_salary * p.attendance_bonus_rate if attendance_rate >= p.attendance_bonus_threshold_pct else 0.0
        late_penalty = late * hourly_rate * p.late_penalty_hours
        absent_penalty = absent * hourly_rate * daily

        gross = regular_pay + overtime_pay + bonus_pay + attendance_bonus - late_penalty - absent_penalty

        income_tax = gross * p.income_tax_rate(gross)
        social_security = gross * p.social_security_rate
        medicare = gross * p.medicare_rate
        health_insurance = p.health_insurance_amount
        provident_fund = gross * p.provident_fund_rate
        total_deductions = income_tax + social_security + medicare + health_insurance + provident_fund
        net = gross - total_deductions

        return PayrollResult(
            month=month,
            year=year,
            standard_daily_hours=round2(daily),
            expected_working_days=expected_days,
            present_days=present,
            absent_days=absent,
            late_days=late,
            attendance_rate_pct=round2(attendance_rate),
            expected_hours=round2(expected_hours),
            total_hours=round2(total_hours),
            regular_hours=round2(regular_hours),
            overtime_hours=round2(overtime_hours),
            bonus_hours=round2(bonus_hours),
            base_salary=round2(base_salary),
            hourly_rate=round2(hourly_rate),
            regular_pay=round2(regular_pay),
            overtime_pay=round2(overtime_pay),
            bonus_pay=round2(bonus_pay),
            attendance_bonus=round2(attendance_bonus),
            late_penalty=round2(late_penalty),
            absent_penalty=round2(absent_penalty),
            gross_salary=round2(gross),
            income_tax=round2(income_tax),
            social_security=round2(social_security),
            medicare=round2(medicare),
            health_insurance=round2(health_insurance),
            provident_fund=round2(provident_fund),
            total_deductions=round2(total_deductions),
            net_salary=round2(net),
        )


def calculate_payroll(
    records: Iterable[AttendanceRecord],
    base_salary: float,
    overtime_multiplier: float,
    month: int,
    year: int,
    config: WorkingHoursConfig,
    holidays: Iterable[Holiday] = (),
    policy: Optional[PayrollPolicy] = None,
) -> PayrollResult:
    return StandardPayrollCalculator(policy).calculate(
        records,
        base_salary=base_salary,
        overtime_multiplier=overtime_multiplier,
        month=month,
        year=year,
        config=config,
        holidays=holidays,
    )
