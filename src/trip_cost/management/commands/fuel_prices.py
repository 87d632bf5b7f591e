from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from trip_cost.exceptions import FuelPriceDataError
from trip_cost.services.fuel_prices import FuelPriceTable, get_fuel_price_table
from trip_cost.services.types import RegionFuelPrice


class Command(BaseCommand):
    help = "List regional fuel prices, optionally from a CSV file."

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument(
            "--csv-path",
            type=str,
            default=None,
            help="Path to a Region,Petrol,Diesel CSV; defaults to the configured table",
        )
        parser.add_argument(
            "--region",
            type=str,
            default=None,
            help="Show the price for a single region",
        )

    def handle(self, *_: Any, **options: Any) -> None:
        try:
            if options["csv_path"]:
                table = FuelPriceTable.from_csv(options["csv_path"])
            else:
                table = get_fuel_price_table()
        except FuelPriceDataError as exc:
            raise CommandError(str(exc)) from exc

        if options["region"] is not None:
            self._write_price(table.lookup(options["region"]))
            return

        for price in table.entries():
            self._write_price(price)
        self.stdout.write(
            self.style.SUCCESS(
                f"{len(table)} regions; fallback {table.fallback.region}"
            )
        )

    def _write_price(self, price: RegionFuelPrice) -> None:
        self.stdout.write(
            f"{price.region}: petrol {price.petrol:.2f}, diesel {price.diesel:.2f}"
        )
