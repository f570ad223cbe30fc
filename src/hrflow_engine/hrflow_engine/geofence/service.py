from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .model import CheckinZone, GeoPoint, ZoneMatch
from .repository import CheckinZoneRepository
from .resolver import nearest_zone, resolve_zone

logger = logging.getLogger(__name__)


class GeofenceService:
    def __init__(self, zones: CheckinZoneRepository):
        self._zones = zones

    def active_zones(self) -> List[CheckinZone]:
        return [z for z in self._zones.list_all() if z.is_active]

    def resolve(self, point: GeoPoint) -> ZoneMatch:
        match = resolve_zone(point, self._zones.list_all())
        logger.debug(
            "Point (%s, %s) in_zone=%s zone=%s", point.latitude, point.longitude, match.in_zone, match.zone_name
        )
        return match

    def nearest(self, point: GeoPoint) -> Optional[Tuple[CheckinZone, float]]:
        return nearest_zone(point, self._zones.list_all())
