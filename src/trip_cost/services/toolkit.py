"""Pure fuel arithmetic helpers.

None of these functions raise on bad numbers: a non-positive or non-finite
distance, efficiency, price or fuel amount yields a zeroed result. Computed
money and fuel figures are rounded to two decimals on return, with ties
rounded away from zero.
"""

from __future__ import annotations

import math

from trip_cost.services.types import (
    AnnualProjection,
    FuelCostBreakdown,
    FuelScenario,
    TripComparison,
)

KMPL_PER_MPG = 0.425144
MPG_PER_KMPL = 2.35214
MONTHS_PER_YEAR = 12

# Lower bounds in km/l, checked from best to worst.
EFFICIENCY_BANDS: tuple[tuple[float, str], ...] = (
    (20.0, "Excellent (20+ km/l)"),
    (15.0, "Good (15-20 km/l)"),
    (10.0, "Average (10-15 km/l)"),
    (5.0, "Poor (5-10 km/l)"),
)
LOWEST_EFFICIENCY_LABEL = "Very Poor (< 5 km/l)"
INVALID_EFFICIENCY_LABEL = "Invalid efficiency"


def _round2(value: float) -> float:
    # Halves go away from zero.
    scaled = value * 100
    whole = math.trunc(scaled)
    if abs(scaled - whole) >= 0.5:
        whole += math.copysign(1, scaled)
    return whole / 100


def _invalid(*values: float) -> bool:
    return any(not math.isfinite(value) or value <= 0 for value in values)


def calculate_fuel_cost(
    distance: float, efficiency: float, price_per_liter: float
) -> FuelCostBreakdown:
    if _invalid(distance, efficiency, price_per_liter):
        return FuelCostBreakdown()

    fuel_needed = distance / efficiency
    total_cost = fuel_needed * price_per_liter
    cost_per_km = total_cost / distance

    return FuelCostBreakdown(
        distance=distance,
        fuel_efficiency=efficiency,
        fuel_price=price_per_liter,
        fuel_needed=_round2(fuel_needed),
        total_cost=_round2(total_cost),
        cost_per_km=_round2(cost_per_km),
    )


def calculate_round_trip(
    distance: float, efficiency: float, price_per_liter: float
) -> FuelCostBreakdown:
    return calculate_fuel_cost(distance * 2, efficiency, price_per_liter)


def compare_fuel_costs(first: FuelScenario, second: FuelScenario) -> TripComparison:
    vehicle1 = calculate_fuel_cost(first.distance, first.efficiency, first.price_per_liter)
    vehicle2 = calculate_fuel_cost(second.distance, second.efficiency, second.price_per_liter)
    return TripComparison(
        vehicle1=vehicle1,
        vehicle2=vehicle2,
        savings=_round2(abs(vehicle1.total_cost - vehicle2.total_cost)),
    )


def calculate_fuel_needed(distance: float, efficiency: float) -> float:
    if _invalid(distance, efficiency):
        return 0.0
    return _round2(distance / efficiency)


def calculate_max_distance(fuel_amount: float, efficiency: float) -> float:
    if _invalid(fuel_amount, efficiency):
        return 0.0
    return _round2(fuel_amount * efficiency)


def convert_mpg_to_kmpl(mpg: float) -> float:
    if _invalid(mpg):
        return 0.0
    return _round2(mpg * KMPL_PER_MPG)


def convert_kmpl_to_mpg(kmpl: float) -> float:
    if _invalid(kmpl):
        return 0.0
    return _round2(kmpl * MPG_PER_KMPL)


def efficiency_category(efficiency: float) -> str:
    if _invalid(efficiency):
        return INVALID_EFFICIENCY_LABEL
    for lower_bound, label in EFFICIENCY_BANDS:
        if efficiency >= lower_bound:
            return label
    return LOWEST_EFFICIENCY_LABEL


def calculate_annual_projection(
    monthly_distance: float, efficiency: float, price_per_liter: float
) -> AnnualProjection:
    if _invalid(monthly_distance, efficiency, price_per_liter):
        return AnnualProjection()

    monthly_cost = calculate_fuel_cost(monthly_distance, efficiency, price_per_liter).total_cost
    return AnnualProjection(
        monthly_distance=monthly_distance,
        monthly_cost=_round2(monthly_cost),
        annual_distance=_round2(monthly_distance * MONTHS_PER_YEAR),
        annual_cost=_round2(monthly_cost * MONTHS_PER_YEAR),
    )
