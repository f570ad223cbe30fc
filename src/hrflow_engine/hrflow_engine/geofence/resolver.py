"""Geofence membership by great-circle (Haversine) distance."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from ..common.validators import require_between
from ..core.constants import EARTH_RADIUS_METERS
from .model import CheckinZone, GeoPoint, ZoneMatch


def validate_point(point: GeoPoint) -> GeoPoint:
    require_between(point.latitude, "latitude", -90.0, 90.0)
    require_between(point.longitude, "longitude", -180.0, 180.0)
    return point


def haversine_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in meters between two points on a sphere of radius 6,371 km."""
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    d_phi = math.radians(b.latitude - a.latitude)
    d_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def resolve_zone(point: GeoPoint, zones: Iterable[CheckinZone]) -> ZoneMatch:
    """Return the first active zone (in input order) containing point.

    Overlapping zones are not ranked by distance: the earlier zone wins even
    when a later one has its center closer to the point.
    """
    validate_point(point)
    for zone in zones:
        if not zone.is_active:
            continue
        distance = haversine_distance(point, zone.center)
        if distance <= zone.radius_meters:
            return ZoneMatch(in_zone=True, zone_name=zone.name, distance_meters=distance)
    return ZoneMatch(in_zone=False)


def nearest_zone(point: GeoPoint, zones: Iterable[CheckinZone]) -> Optional[Tuple[CheckinZone, float]]:
    """Nearest active zone center and its distance, whether or not point is inside."""
    validate_point(point)
    best: Optional[Tuple[CheckinZone, float]] = None
    for zone in zones:
        if not zone.is_active:
            continue
        distance = haversine_distance(point, zone.center)
        if best is None or distance < best[1]:
            best = (zone, distance)
    return best
