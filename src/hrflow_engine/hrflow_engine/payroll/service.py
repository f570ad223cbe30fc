from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..common.validators import require_between
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..holidays.repository import HolidayRepository
from ..working_hours.service import WorkingHoursService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollPolicy, PayrollResult

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        working_hours: WorkingHoursService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        policy: Optional[PayrollPolicy] = None,
        default_overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
    ):
        self._attendance = attendance
        self._holidays = holidays
        self._working_hours = working_hours
        self._calculator = calculator or StandardPayrollCalculator(policy)
        self._policy = policy
        self._default_overtime_multiplier = float(default_overtime_multiplier)

    def calculate_for_records(
        self,
        records: Iterable[AttendanceRecord],
        *,
        month: int,
        year: int,
        base_salary: float,
        overtime_multiplier: Optional[float] = None,
        user_id: Optional[int] = None,
    ) -> PayrollResult:
        multiplier = self._default_overtime_multiplier if overtime_multiplier is None else overtime_multiplier
        result = self._calculator.calculate(
            records,
            base_salary=base_salary,
            overtime_multiplier=multiplier,
            month=month,
            year=year,
            config=self._working_hours.for_user(user_id),
            holidays=self._holidays.list_all(),
            policy=self._policy,
        )
        logger.debug(
            "Payroll %d-%02d user=%s: gross=%s deductions=%s net=%s",
            year,
            month,
            user_id,
            result.gross_salary,
            result.total_deductions,
            result.net_salary,
        )
        return result

    def calculate_for_user(
        self,
        user_id: int,
        *,
        month: int,
        year: int,
        base_salary: float,
        overtime_multiplier: Optional[float] = None,
    ) -> PayrollResult:
        require_between(month, "month", 1, 12)
        first, last = month_bounds(year, month)
        records = self._attendance.list_for_user(user_id, start_date=first, end_date=last)
        return self.calculate_for_records(
            records,
            month=month,
            year=year,
            base_salary=base_salary,
            overtime_multiplier=overtime_multiplier,
            user_id=user_id,
        )
