from __future__ import annotations

import pytest
from django.test import Client

from trip_cost.services.fuel_prices import FuelPriceTable
from trip_cost.services.types import GeoPoint

KOCHI = GeoPoint(latitude=9.9312, longitude=76.2673)
BENGALURU = GeoPoint(latitude=12.9716, longitude=77.5946)


class FakeGeocoder:
    def __init__(self, points: dict[str, GeoPoint], error: Exception | None = None) -> None:
        self.points = points
        self.error = error
        self.queries: list[str] = []

    def geocode(self, query: str) -> GeoPoint:
        self.queries.append(query)
        if query in self.points:
            return self.points[query]
        if self.error is not None:
            raise self.error
        raise KeyError(query)


@pytest.fixture
def api_client() -> Client:
    return Client()


@pytest.fixture
def fake_geocoder() -> FakeGeocoder:
    return FakeGeocoder({"Kochi": KOCHI, "Bengaluru": BENGALURU})


@pytest.fixture
def price_table() -> FuelPriceTable:
    return FuelPriceTable.default()


@pytest.fixture
def geocoder_factory() -> type[FakeGeocoder]:
    return FakeGeocoder


@pytest.fixture
def kochi() -> GeoPoint:
    return KOCHI


@pytest.fixture
def bengaluru() -> GeoPoint:
    return BENGALURU
