from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from trip_cost.exceptions import FuelPriceDataError, GeocodingError, InvalidTripInputError
from trip_cost.services.calculator import TripCostCalculator


class Command(BaseCommand):
    help = "Estimate the fuel cost of a road trip between two places."

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument("origin", help="Starting place name")
        parser.add_argument("destination", help="Destination place name")
        parser.add_argument(
            "--region", default="", help="Region used to look up fuel prices"
        )
        parser.add_argument(
            "--fuel-type", default="petrol", help="petrol or diesel"
        )
        parser.add_argument(
            "--mileage", type=float, required=True, help="Vehicle mileage in km per liter"
        )

    def handle(self, *_: Any, **options: Any) -> None:
        try:
            calculator = TripCostCalculator()
            result = calculator.compute_trip(
                options["origin"],
                options["destination"],
                options["region"],
                options["fuel_type"],
                options["mileage"],
            )
        except (GeocodingError, InvalidTripInputError, FuelPriceDataError) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(f"Distance: {result.route.distance}")
        self.stdout.write(f"Duration: {result.route.duration}")
        self.stdout.write(
            f"Fuel price: {result.price_per_liter:.2f}/l ({result.fuel_price.region})"
        )
        self.stdout.write(f"Fuel needed: {result.fuel_needed:.2f} l")
        self.stdout.write(self.style.SUCCESS(f"Estimated fuel cost: {result.fuel_cost:.2f}"))
