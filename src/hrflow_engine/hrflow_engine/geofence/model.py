from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CheckinZone:
    """Domain entity: circular area where check-in/check-out is allowed."""

    name: str
    latitude: float
    longitude: float
    radius_meters: float
    is_active: bool = True

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


@dataclass(frozen=True)
class ZoneMatch:
    in_zone: bool
    zone_name: Optional[str] = None
    distance_meters: Optional[float] = None
