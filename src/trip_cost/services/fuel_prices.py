from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import polars as pl
from django.conf import settings

from trip_cost.exceptions import FuelPriceDataError
from trip_cost.services.types import RegionFuelPrice

logger = logging.getLogger(__name__)

NATIONAL_AVERAGE = RegionFuelPrice(region="India (Average)", petrol=102.50, diesel=90.25)

DEFAULT_REGION_PRICES: tuple[RegionFuelPrice, ...] = (
    RegionFuelPrice(region="Kerala", petrol=102.85, diesel=89.15),
    RegionFuelPrice(region="Tamil Nadu", petrol=101.50, diesel=88.75),
    RegionFuelPrice(region="Karnataka", petrol=102.86, diesel=88.94),
    RegionFuelPrice(region="Maharashtra", petrol=106.31, diesel=94.27),
    RegionFuelPrice(region="Delhi", petrol=96.72, diesel=89.62),
    RegionFuelPrice(region="Gujarat", petrol=96.77, diesel=92.91),
    RegionFuelPrice(region="Rajasthan", petrol=107.49, diesel=92.91),
    RegionFuelPrice(region="Uttar Pradesh", petrol=96.57, diesel=89.76),
    RegionFuelPrice(region="West Bengal", petrol=106.03, diesel=92.76),
    RegionFuelPrice(region="Punjab", petrol=108.53, diesel=94.61),
)

CSV_COLUMNS = {"Region", "Petrol", "Diesel"}


class FuelPriceProvider(Protocol):
    def lookup(self, region: str) -> RegionFuelPrice: ...


def normalize_region(region: str) -> str:
    return region.strip().lower()


class FuelPriceTable:
    """Read-only region to fuel price mapping.

    Lookups ignore case and surrounding whitespace. Unknown regions resolve to
    the fallback entry instead of failing.
    """

    def __init__(
        self,
        prices: Iterable[RegionFuelPrice],
        fallback: RegionFuelPrice = NATIONAL_AVERAGE,
    ) -> None:
        self._prices: dict[str, RegionFuelPrice] = {}
        for price in prices:
            self._prices.setdefault(normalize_region(price.region), price)
        self.fallback = fallback

    def __len__(self) -> int:
        return len(self._prices)

    def __contains__(self, region: object) -> bool:
        return isinstance(region, str) and normalize_region(region) in self._prices

    def lookup(self, region: str) -> RegionFuelPrice:
        return self._prices.get(normalize_region(region), self.fallback)

    def entries(self) -> list[RegionFuelPrice]:
        return sorted(self._prices.values(), key=lambda price: price.region)

    @classmethod
    def default(cls) -> FuelPriceTable:
        return cls(DEFAULT_REGION_PRICES)

    @classmethod
    def from_csv(
        cls, csv_path: str | Path, fallback: RegionFuelPrice = NATIONAL_AVERAGE
    ) -> FuelPriceTable:
        csv_path = Path(csv_path)
        if not csv_path.exists():
            raise FuelPriceDataError(f"Fuel price file does not exist: {csv_path}")

        frame = _load_and_transform(csv_path)
        prices = [
            RegionFuelPrice(region=row["region"], petrol=row["petrol"], diesel=row["diesel"])
            for row in frame.to_dicts()
        ]
        logger.info("Loaded %d fuel price rows from %s", len(prices), csv_path)
        return cls(prices, fallback=fallback)


def _load_and_transform(csv_path: Path) -> pl.DataFrame:
    try:
        frame = pl.read_csv(csv_path, infer_schema_length=1000)
    except pl.exceptions.PolarsError as exc:
        raise FuelPriceDataError(f"Could not read fuel price file: {csv_path}") from exc

    missing_columns = CSV_COLUMNS.difference(frame.columns)
    if missing_columns:
        raise FuelPriceDataError(f"Missing expected columns: {sorted(missing_columns)}")

    return (
        frame.select(
            pl.col("Region")
            .cast(pl.Utf8, strict=False)
            .str.strip_chars()
            .fill_null("")
            .alias("region"),
            pl.col("Petrol").cast(pl.Float64, strict=False).alias("petrol"),
            pl.col("Diesel").cast(pl.Float64, strict=False).alias("diesel"),
        )
        .filter(
            (pl.col("region").str.len_chars() > 0)
            & pl.col("petrol").is_not_null()
            & pl.col("diesel").is_not_null()
            & (pl.col("petrol") > 0)
            & (pl.col("diesel") > 0)
        )
        .with_columns(pl.col("region").str.to_lowercase().alias("region_key"))
        .unique(subset=["region_key"], keep="first", maintain_order=True)
        .drop("region_key")
    )


def get_fuel_price_table() -> FuelPriceTable:
    csv_path = settings.FUEL_PRICE_TABLE_PATH
    if csv_path:
        return FuelPriceTable.from_csv(csv_path)
    return FuelPriceTable.default()
