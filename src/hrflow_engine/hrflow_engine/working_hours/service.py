from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from .model import WorkingHoursConfig
from .repository import WorkingHoursRepository
from .rules import WorkingStatusInfo, get_working_status, resolve_working_hours, standard_daily_hours

logger = logging.getLogger(__name__)


class WorkingHoursService:
    def __init__(self, working_hours: WorkingHoursRepository):
        self._working_hours = working_hours

    def for_user(self, user_id: Optional[int] = None) -> WorkingHoursConfig:
        config = resolve_working_hours(self._working_hours.list_all(), user_id)
        logger.debug("Working hours for user %s: %s (%s)", user_id, config.shift_name, config)
        return config

    def standard_daily_hours(self, user_id: Optional[int] = None) -> float:
        return standard_daily_hours(self.for_user(user_id))

    def status(self, user_id: Optional[int] = None, *, now: Optional[datetime] = None) -> WorkingStatusInfo:
        return get_working_status(now or now_local(), self.for_user(user_id))
