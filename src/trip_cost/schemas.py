from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TripCostRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    origin: str = Field(min_length=2, max_length=300)
    destination: str = Field(min_length=2, max_length=300)
    region: str = Field(default="", max_length=100)
    fuel_type: str = Field(default="petrol", max_length=20)
    mileage: float = Field(gt=0.0, le=200.0)


class Coordinate(BaseModel):
    latitude: float
    longitude: float


class RouteResponse(BaseModel):
    distance: str
    duration: str
    distance_km: float


class FuelPriceResponse(BaseModel):
    region: str
    petrol: float
    diesel: float


class FuelPriceListResponse(BaseModel):
    prices: list[FuelPriceResponse]
    fallback: FuelPriceResponse


class TripCostResponse(BaseModel):
    origin: Coordinate
    destination: Coordinate
    route: RouteResponse
    fuel_price: FuelPriceResponse
    fuel_type: str
    mileage: float
    price_per_liter: float
    fuel_needed: float
    fuel_cost: float


class FuelCostRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    distance: float
    efficiency: float
    price_per_liter: float


class FuelCostResponse(BaseModel):
    distance: float
    fuel_efficiency: float
    fuel_price: float
    fuel_needed: float
    total_cost: float
    cost_per_km: float


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    vehicle1: FuelCostRequest
    vehicle2: FuelCostRequest


class CompareResponse(BaseModel):
    vehicle1: FuelCostResponse
    vehicle2: FuelCostResponse
    savings: float


class FuelNeededRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    distance: float
    efficiency: float


class MaxDistanceRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    fuel_amount: float
    efficiency: float


class ConversionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    value: float
    direction: Literal["mpg_to_kmpl", "kmpl_to_mpg"] = "mpg_to_kmpl"


class EfficiencyCategoryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    efficiency: float


class AnnualProjectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    monthly_distance: float
    efficiency: float
    price_per_liter: float


class AnnualProjectionResponse(BaseModel):
    monthly_distance: float
    monthly_cost: float
    annual_distance: float
    annual_cost: float
