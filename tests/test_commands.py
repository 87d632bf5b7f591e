from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from django.core.management import CommandError, call_command

from trip_cost.exceptions import LocationNotFoundError
from trip_cost.services.calculator import TripCostCalculator


def test_trip_cost_command_prints_estimate(mocker, fake_geocoder, price_table) -> None:
    mocker.patch(
        "trip_cost.management.commands.trip_cost.TripCostCalculator",
        return_value=TripCostCalculator(geocoder=fake_geocoder, price_table=price_table),
    )
    out = StringIO()

    call_command(
        "trip_cost",
        "Kochi",
        "Bengaluru",
        region="Kerala",
        fuel_type="petrol",
        mileage=18.0,
        stdout=out,
    )

    output = out.getvalue()
    assert "Distance:" in output
    assert "102.85/l (Kerala)" in output
    assert "Estimated fuel cost:" in output


def test_trip_cost_command_reports_geocoding_failure(mocker, geocoder_factory, price_table) -> None:
    geocoder = geocoder_factory({}, error=LocationNotFoundError("Location not found"))
    mocker.patch(
        "trip_cost.management.commands.trip_cost.TripCostCalculator",
        return_value=TripCostCalculator(geocoder=geocoder, price_table=price_table),
    )

    with pytest.raises(CommandError, match="failed to geocode origin"):
        call_command("trip_cost", "Nowhere", "Bengaluru", mileage=18.0)


def test_fuel_prices_command_lists_default_table() -> None:
    out = StringIO()

    call_command("fuel_prices", stdout=out)

    output = out.getvalue()
    assert "Kerala: petrol 102.85, diesel 89.15" in output
    assert "10 regions; fallback India (Average)" in output


def test_fuel_prices_command_single_region_from_csv(tmp_path: Path) -> None:
    csv_path = tmp_path / "prices.csv"
    csv_path.write_text("Region,Petrol,Diesel\nGoa,97.10,89.90\n", encoding="utf-8")
    out = StringIO()

    call_command("fuel_prices", csv_path=str(csv_path), region="GOA", stdout=out)

    assert out.getvalue().strip() == "Goa: petrol 97.10, diesel 89.90"


def test_fuel_prices_command_rejects_missing_csv(tmp_path: Path) -> None:
    with pytest.raises(CommandError):
        call_command("fuel_prices", csv_path=str(tmp_path / "missing.csv"))


def test_trip_cost_command_reports_unavailable_table(settings, tmp_path: Path) -> None:
    settings.FUEL_PRICE_TABLE_PATH = str(tmp_path / "missing.csv")

    with pytest.raises(CommandError, match="does not exist"):
        call_command("trip_cost", "Kochi", "Bengaluru", mileage=18.0)
