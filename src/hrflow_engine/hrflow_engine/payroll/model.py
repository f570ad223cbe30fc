from __future__ import annotations

from dataclasses import dataclass

from ..core import constants as c


@dataclass(frozen=True)
class PayrollPolicy:
    """Rates and fixed amounts applied by the payroll calculator."""

    punctuality_bonus_hours: float = c.PUNCTUALITY_BONUS_HOURS
    punctuality_bonus_multiplier: float = c.PUNCTUALITY_BONUS_MULTIPLIER
    attendance_bonus_threshold_pct: float = c.ATTENDANCE_BONUS_THRESHOLD_PCT
    attendance_bonus_rate: float = c.ATTENDANCE_BONUS_RATE
    late_penalty_hours: float = c.LATE_PENALTY_HOURS
    income_tax_threshold: float = c.INCOME_TAX_THRESHOLD
    income_tax_rate_low: float = c.INCOME_TAX_RATE_LOW
    income_tax_rate_high: float = c.INCOME_TAX_RATE_HIGH
    social_security_rate: float = c.SOCIAL_SECURITY_RATE
    medicare_rate: float = c.MEDICARE_RATE
    health_insurance_amount: float = c.HEALTH_INSURANCE_AMOUNT
    provident_fund_rate: float = c.PROVIDENT_FUND_RATE

    def income_tax_rate(self, gross_salary: float) -> float:
        # The whole gross is taxed at the rate of the bracket it lands in.
        if gross_salary > self.income_tax_threshold:
            return self.income_tax_rate_high
        return self.income_tax_rate_low


DEFAULT_PAYROLL_POLICY = PayrollPolicy()


@dataclass(frozen=True)
class PayrollResult:
    """Itemized payroll for one user and one calendar month.

    Hours and money are rounded to 2 decimals; gross (and therefore net) may be
    negative when penalties exceed earnings.
    """

    month: int
    year: int
    standard_daily_hours: float

    expected_working_days: int
    present_days: int
    absent_days: int
    late_days: int
    attendance_rate_pct: float

    expected_hours: float
    total_hours: float
    regular_hours: float
    overtime_hours: float
    bonus_hours: float

    base_salary: float
    hourly_rate: float
    regular_pay: float
    overtime_pay: float
    bonus_pay: float
    attendance_bonus: float
    late_penalty: float
    absent_penalty: float
    gross_salary: float

    income_tax: float
    social_security: float
    medicare: float
    health_insurance: float
    provident_fund: float
    total_deductions: float

    net_salary: float

    def as_dict(self) -> dict:
        return {
            "period": {"month": self.month, "year": self.year},
            "attendance": {
                "expected_working_days": self.expected_working_days,
                "present_days": self.present_days,
                "absent_days": self.absent_days,
                "late_days": self.late_days,
                "attendance_rate": self.attendance_rate_pct,
            },
            "hours": {
                "standard_daily_hours": self.standard_daily_hours,
                "expected_hours": self.expected_hours,
                "total_hours": self.total_hours,
                "regular_hours": self.regular_hours,
                "overtime_hours": self.overtime_hours,
                "bonus_hours": self.bonus_hours,
            },
            "salary": {
                "base_salary": self.base_salary,
                "hourly_rate": self.hourly_rate,
                "regular_pay": self.regular_pay,
                "overtime_pay": self.overtime_pay,
                "bonus_pay": self.bonus_pay,
                "attendance_bonus": self.attendance_bonus,
                "late_penalty": self.late_penalty,
                "absent_penalty": self.absent_penalty,
                "gross_salary": self.gross_salary,
            },
            "deductions": {
                "income_tax": self.income_tax,
                "social_security": self.social_security,
                "medicare": self.medicare,
                "health_insurance": self.health_insurance,
                "provident_fund": self.provident_fund,
                "total_deductions": self.total_deductions,
            },
            "net_salary": self.net_salary,
        }
