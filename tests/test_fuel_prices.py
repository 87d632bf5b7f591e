from __future__ import annotations

from pathlib import Path

import pytest

from trip_cost.exceptions import FuelPriceDataError
from trip_cost.services.fuel_prices import (
    NATIONAL_AVERAGE,
    FuelPriceTable,
    get_fuel_price_table,
)
from trip_cost.services.regions import list_regions
from trip_cost.services.types import FuelType, RegionFuelPrice


def test_lookup_ignores_case_and_padding(price_table) -> None:
    assert price_table.lookup("KERALA ") == price_table.lookup("kerala")
    assert price_table.lookup("  Tamil Nadu") == RegionFuelPrice(
        region="Tamil Nadu", petrol=101.50, diesel=88.75
    )


def test_unknown_region_falls_back_to_national_average(price_table) -> None:
    assert price_table.lookup("Atlantis") == NATIONAL_AVERAGE
    assert price_table.lookup("") == NATIONAL_AVERAGE
    assert NATIONAL_AVERAGE.region == "India (Average)"


def test_entries_are_sorted_by_region(price_table) -> None:
    regions = [entry.region for entry in price_table.entries()]

    assert regions == sorted(regions)
    assert len(price_table) == 10
    assert "delhi" in price_table


def test_price_for_fuel_type() -> None:
    price = RegionFuelPrice(region="Kerala", petrol=102.85, diesel=89.15)

    assert price.price_for(FuelType.PETROL) == 102.85
    assert price.price_for(FuelType.DIESEL) == 89.15


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("petrol", FuelType.PETROL),
        ("PETROL ", FuelType.PETROL),
        ("diesel", FuelType.DIESEL),
        ("cng", FuelType.DIESEL),
        ("", FuelType.DIESEL),
    ],
)
def test_fuel_type_parse_defaults_to_diesel(raw: str, expected: FuelType) -> None:
    assert FuelType.parse(raw) is expected


def test_from_csv_normalizes_and_deduplicates(tmp_path: Path) -> None:
    csv_path = tmp_path / "prices.csv"
    csv_path.write_text(
        "\n".join(
            [
                "Region,Petrol,Diesel",
                " Goa ,97.10,89.90",
                "GOA,99.00,91.00",
                "Assam,0,88.00",
                ",100.00,90.00",
                "Bihar,107.24,94.04",
            ]
        ),
        encoding="utf-8",
    )

    table = FuelPriceTable.from_csv(csv_path)

    assert len(table) == 2
    assert table.lookup("goa") == RegionFuelPrice(region="Goa", petrol=97.10, diesel=89.90)
    assert table.lookup("Assam") == NATIONAL_AVERAGE
    assert table.lookup("bihar").petrol == pytest.approx(107.24)


def test_from_csv_rejects_missing_columns(tmp_path: Path) -> None:
    csv_path = tmp_path / "prices.csv"
    csv_path.write_text("Region,Petrol\nGoa,97.10\n", encoding="utf-8")

    with pytest.raises(FuelPriceDataError, match="Diesel"):
        FuelPriceTable.from_csv(csv_path)


def test_from_csv_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FuelPriceDataError):
        FuelPriceTable.from_csv(tmp_path / "missing.csv")


def test_configured_table_is_loaded_from_csv(settings, tmp_path: Path) -> None:
    csv_path = tmp_path / "prices.csv"
    csv_path.write_text("Region,Petrol,Diesel\nGoa,97.10,89.90\n", encoding="utf-8")
    settings.FUEL_PRICE_TABLE_PATH = str(csv_path)

    table = get_fuel_price_table()

    assert len(table) == 1
    assert table.lookup("Kerala") == NATIONAL_AVERAGE


def test_default_table_when_no_path_configured(settings) -> None:
    settings.FUEL_PRICE_TABLE_PATH = ""

    assert get_fuel_price_table().lookup("kerala").petrol == 102.85


def test_region_list_contains_states_and_territories() -> None:
    regions = list_regions()

    assert len(regions) == 36
    assert regions[0] == "Andhra Pradesh"
    assert "Kerala" in regions
    assert "Andaman and Nicobar Islands" in regions
