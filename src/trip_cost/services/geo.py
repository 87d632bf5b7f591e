from __future__ import annotations

import math

from trip_cost.services.types import GeoPoint

EARTH_RADIUS_KM = 6371.0
ROAD_DISTANCE_FACTOR = 1.3
AVERAGE_SPEED_KMH = 50.0


def haversine_km(start: GeoPoint, finish: GeoPoint) -> float:
    lat1_rad = math.radians(start.latitude)
    lat2_rad = math.radians(finish.latitude)

    dlat = math.radians(finish.latitude - start.latitude)
    dlon = math.radians(finish.longitude - start.longitude)

    a = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2.0) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def estimate_road_distance_km(
    start: GeoPoint, finish: GeoPoint, factor: float = ROAD_DISTANCE_FACTOR
) -> float:
    """Approximate driving distance from the straight-line distance."""
    return haversine_km(start, finish) * factor


def estimate_duration_hours(road_km: float, average_speed_kmh: float = AVERAGE_SPEED_KMH) -> float:
    return road_km / average_speed_kmh


def format_distance(road_km: float) -> str:
    return f"{road_km:.1f} km"


def format_duration(hours: float) -> str:
    if hours < 1:
        return f"{int(hours * 60)} mins"

    whole_hours = int(hours)
    minutes = int((hours - whole_hours) * 60)
    hour_label = "hour" if whole_hours == 1 else "hours"

    if minutes == 0:
        return f"{whole_hours} {hour_label}"
    return f"{whole_hours} {hour_label} {minutes} mins"
