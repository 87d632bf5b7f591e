from __future__ import annotations

from django.conf import settings

from trip_cost.services.geo import (
    estimate_duration_hours,
    estimate_road_distance_km,
    format_distance,
    format_duration,
)
from trip_cost.services.types import GeoPoint, RouteEstimate


class RouteEstimator:
    """Estimates a driving route without calling a routing engine.

    Road distance is the great-circle distance scaled by a correction factor,
    and duration assumes a constant average speed.
    """

    def __init__(
        self,
        road_distance_factor: float | None = None,
        average_speed_kmh: float | None = None,
    ) -> None:
        self.road_distance_factor = (
            road_distance_factor
            if road_distance_factor is not None
            else float(settings.ROAD_DISTANCE_FACTOR)
        )
        self.average_speed_kmh = (
            average_speed_kmh
            if average_speed_kmh is not None
            else float(settings.AVERAGE_SPEED_KMH)
        )

    def route(self, start: GeoPoint, finish: GeoPoint) -> RouteEstimate:
        road_km = estimate_road_distance_km(start, finish, factor=self.road_distance_factor)
        hours = estimate_duration_hours(road_km, average_speed_kmh=self.average_speed_kmh)
        return RouteEstimate(
            distance_km=road_km,
            distance=format_distance(road_km),
            duration=format_duration(hours),
        )
