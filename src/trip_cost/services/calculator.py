from __future__ import annotations

import logging
import math

from trip_cost.exceptions import GeocodingError, InvalidTripInputError
from trip_cost.services.fuel_prices import FuelPriceProvider, get_fuel_price_table
from trip_cost.services.geocoding import Geocoder, GeocodingClient
from trip_cost.services.routing import RouteEstimator
from trip_cost.services.types import FuelType, GeoPoint, TripResult

logger = logging.getLogger(__name__)


class TripCostCalculator:
    def __init__(
        self,
        geocoder: Geocoder | None = None,
        price_table: FuelPriceProvider | None = None,
        route_estimator: RouteEstimator | None = None,
    ) -> None:
        self.geocoder = geocoder or GeocodingClient()
        self.price_table = price_table or get_fuel_price_table()
        self.route_estimator = route_estimator or RouteEstimator()

    def compute_trip(
        self,
        origin: str,
        destination: str,
        region: str,
        fuel_type: str,
        mileage: float,
    ) -> TripResult:
        """Estimate the fuel cost of driving from origin to destination.

        Figures are returned unrounded. Geocoding errors abort the calculation
        and are re-raised with the failing location attached.
        """
        if not math.isfinite(mileage) or mileage <= 0:
            raise InvalidTripInputError("Mileage must be a positive number")

        origin_point = self._geocode(origin, "origin")
        destination_point = self._geocode(destination, "destination")

        route = self.route_estimator.route(origin_point, destination_point)
        fuel_price = self.price_table.lookup(region)
        price_per_liter = fuel_price.price_for(FuelType.parse(fuel_type))

        fuel_needed = route.distance_km / mileage
        fuel_cost = fuel_needed * price_per_liter

        logger.info(
            "Trip %s -> %s: %.1f km, %s at %.2f/l, cost %.2f",
            origin,
            destination,
            route.distance_km,
            fuel_price.region,
            price_per_liter,
            fuel_cost,
        )
        return TripResult(
            origin=origin_point,
            destination=destination_point,
            route=route,
            fuel_price=fuel_price,
            fuel_type=fuel_type,
            mileage=mileage,
            price_per_liter=price_per_liter,
            fuel_needed=fuel_needed,
            fuel_cost=fuel_cost,
        )

    def _geocode(self, query: str, location: str) -> GeoPoint:
        try:
            return self.geocoder.geocode(query)
        except GeocodingError as exc:
            raise exc.with_location(location) from exc
