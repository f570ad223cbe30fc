from __future__ import annotations

from typing import Protocol, Sequence

from .model import WorkingHoursConfig


class WorkingHoursRepository(Protocol):
    def list_all(self) -> Sequence[WorkingHoursConfig]:
        raise NotImplementedError
