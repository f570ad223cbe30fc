from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...holidays.model import Holiday
from ...working_hours.model import WorkingHoursConfig
from ..model import PayrollPolicy, PayrollResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
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
        raise NotImplementedError
