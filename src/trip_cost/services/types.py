from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"

    @classmethod
    def parse(cls, value: str) -> FuelType:
        # Anything other than petrol is priced as diesel.
        if value.strip().lower() == cls.PETROL.value:
            return cls.PETROL
        return cls.DIESEL


@dataclass(slots=True, frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(slots=True, frozen=True)
class RouteEstimate:
    distance_km: float
    distance: str
    duration: str


@dataclass(slots=True, frozen=True)
class RegionFuelPrice:
    region: str
    petrol: float
    diesel: float

    def price_for(self, fuel_type: FuelType) -> float:
        return self.petrol if fuel_type is FuelType.PETROL else self.diesel


@dataclass(slots=True, frozen=True)
class TripResult:
    origin: GeoPoint
    destination: GeoPoint
    route: RouteEstimate
    fuel_price: RegionFuelPrice
    fuel_type: str
    mileage: float
    price_per_liter: float
    fuel_needed: float
    fuel_cost: float


@dataclass(slots=True, frozen=True)
class FuelCostBreakdown:
    distance: float = 0.0
    fuel_efficiency: float = 0.0
    fuel_price: float = 0.0
    fuel_needed: float = 0.0
    total_cost: float = 0.0
    cost_per_km: float = 0.0


@dataclass(slots=True, frozen=True)
class FuelScenario:
    distance: float
    efficiency: float
    price_per_liter: float


@dataclass(slots=True, frozen=True)
class TripComparison:
    vehicle1: FuelCostBreakdown
    vehicle2: FuelCostBreakdown
    savings: float


@dataclass(slots=True, frozen=True)
class AnnualProjection:
    monthly_distance: float = 0.0
    monthly_cost: float = 0.0
    annual_distance: float = 0.0
    annual_cost: float = 0.0
