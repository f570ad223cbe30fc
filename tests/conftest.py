from __future__ import annotations

from datetime import datetime

import pytest

from hrflow_engine.working_hours.model import WorkingHoursConfig


@pytest.fixture
def fixed_now() -> datetime:
    # Tuesday, a working day under the default Tue-Sun schedule
    return datetime(2026, 9, 1, 9, 25, 0)


@pytest.fixture
def standard_config() -> WorkingHoursConfig:
    return WorkingHoursConfig.from_strings("09:30", "17:00", break_minutes=60, work_days="2,3,4,5,6,0")
