"""
Geographic distance primitives for route planning.

Straight-line (great-circle) distance only; no routing service is consulted.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
URBAN_SPEED_KMH = 30.0


@dataclass(frozen=True)
class Location:
    """A point in decimal degrees."""
    lat: float
    lng: float


def haversine_km(a: Location, b: Location) -> float:
    """
    Great-circle distance between two points using the Haversine formula.

    Args:
        a: Start point
        b: End point

    Returns:
        Distance in kilometres
    """
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )

    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def travel_minutes(distance_km: float, speed_kmh: float = URBAN_SPEED_KMH) -> float:
    """Minutes needed to cover ``distance_km`` at a constant city speed."""
    return (distance_km / speed_kmh) * 60
