from __future__ import annotations

from typing import Protocol, Sequence

from .model import CheckinZone


class CheckinZoneRepository(Protocol):
    def list_all(self) -> Sequence[CheckinZone]:
        raise NotImplementedError
