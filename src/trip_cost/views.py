from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict
from typing import Any, TypeVar

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from pydantic import BaseModel, ValidationError

from trip_cost.exceptions import (
    FuelPriceDataError,
    GeocodingNetworkError,
    GeocodingParseError,
    InvalidTripInputError,
    LocationNotFoundError,
)
from trip_cost.schemas import (
    AnnualProjectionRequest,
    AnnualProjectionResponse,
    CompareRequest,
    CompareResponse,
    ConversionRequest,
    EfficiencyCategoryRequest,
    FuelCostRequest,
    FuelCostResponse,
    FuelNeededRequest,
    FuelPriceListResponse,
    FuelPriceResponse,
    MaxDistanceRequest,
    TripCostRequest,
    TripCostResponse,
)
from trip_cost.services import toolkit
from trip_cost.services.calculator import TripCostCalculator
from trip_cost.services.fuel_prices import get_fuel_price_table
from trip_cost.services.regions import list_regions
from trip_cost.services.types import FuelScenario

logger = logging.getLogger(__name__)

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def get_trip_calculator() -> TripCostCalculator:
    return TripCostCalculator()


@require_GET
def health_view(_: HttpRequest) -> HttpResponse:
    return JsonResponse({"status": "ok"})


@require_GET
def regions_view(_: HttpRequest) -> HttpResponse:
    return JsonResponse({"regions": list_regions()})


@require_GET
def fuel_prices_view(request: HttpRequest) -> HttpResponse:
    try:
        table = get_fuel_price_table()
    except FuelPriceDataError as exc:
        return _error_response("price_table_unavailable", str(exc), status=500)

    region = request.GET.get("region")
    if region is not None:
        price = FuelPriceResponse.model_validate(asdict(table.lookup(region)))
        return JsonResponse(price.model_dump(mode="json"))

    response = FuelPriceListResponse(
        prices=[FuelPriceResponse.model_validate(asdict(entry)) for entry in table.entries()],
        fallback=FuelPriceResponse.model_validate(asdict(table.fallback)),
    )
    return JsonResponse(response.model_dump(mode="json"))


@csrf_exempt
@require_POST
def trip_cost_view(request: HttpRequest) -> HttpResponse:
    trip_request = _validated_payload(request, TripCostRequest)
    if isinstance(trip_request, JsonResponse):
        return trip_request

    started = time.perf_counter()
    try:
        calculator = get_trip_calculator()
        result = calculator.compute_trip(
            trip_request.origin,
            trip_request.destination,
            trip_request.region,
            trip_request.fuel_type,
            trip_request.mileage,
        )
    except LocationNotFoundError as exc:
        return _error_response("location_not_found", str(exc), status=400)
    except InvalidTripInputError as exc:
        return _error_response("invalid_input", str(exc), status=400)
    except GeocodingParseError as exc:
        return _error_response("upstream_parse_error", str(exc), status=502)
    except GeocodingNetworkError as exc:
        return _error_response("upstream_error", str(exc), status=502)
    except FuelPriceDataError as exc:
        return _error_response("price_table_unavailable", str(exc), status=500)

    logger.info(
        "Trip cost %s -> %s computed in %.1f ms",
        trip_request.origin,
        trip_request.destination,
        (time.perf_counter() - started) * 1000,
    )
    response = TripCostResponse.model_validate(asdict(result))
    return JsonResponse(response.model_dump(mode="json"), status=200)


@csrf_exempt
@require_POST
def fuel_cost_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, FuelCostRequest)
    if isinstance(payload, JsonResponse):
        return payload
    breakdown = toolkit.calculate_fuel_cost(
        payload.distance, payload.efficiency, payload.price_per_liter
    )
    return _model_response(FuelCostResponse.model_validate(asdict(breakdown)))


@csrf_exempt
@require_POST
def round_trip_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, FuelCostRequest)
    if isinstance(payload, JsonResponse):
        return payload
    breakdown = toolkit.calculate_round_trip(
        payload.distance, payload.efficiency, payload.price_per_liter
    )
    return _model_response(FuelCostResponse.model_validate(asdict(breakdown)))


@csrf_exempt
@require_POST
def compare_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, CompareRequest)
    if isinstance(payload, JsonResponse):
        return payload
    comparison = toolkit.compare_fuel_costs(
        FuelScenario(**payload.vehicle1.model_dump()),
        FuelScenario(**payload.vehicle2.model_dump()),
    )
    return _model_response(CompareResponse.model_validate(asdict(comparison)))


@csrf_exempt
@require_POST
def fuel_needed_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, FuelNeededRequest)
    if isinstance(payload, JsonResponse):
        return payload
    return JsonResponse(
        {"fuel_needed": toolkit.calculate_fuel_needed(payload.distance, payload.efficiency)}
    )


@csrf_exempt
@require_POST
def max_distance_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, MaxDistanceRequest)
    if isinstance(payload, JsonResponse):
        return payload
    return JsonResponse(
        {"max_distance": toolkit.calculate_max_distance(payload.fuel_amount, payload.efficiency)}
    )


@csrf_exempt
@require_POST
def convert_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, ConversionRequest)
    if isinstance(payload, JsonResponse):
        return payload
    if payload.direction == "mpg_to_kmpl":
        converted = toolkit.convert_mpg_to_kmpl(payload.value)
    else:
        converted = toolkit.convert_kmpl_to_mpg(payload.value)
    return JsonResponse({"direction": payload.direction, "value": converted})


@csrf_exempt
@require_POST
def efficiency_category_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, EfficiencyCategoryRequest)
    if isinstance(payload, JsonResponse):
        return payload
    return JsonResponse({"category": toolkit.efficiency_category(payload.efficiency)})


@csrf_exempt
@require_POST
def annual_projection_view(request: HttpRequest) -> HttpResponse:
    payload = _validated_payload(request, AnnualProjectionRequest)
    if isinstance(payload, JsonResponse):
        return payload
    projection = toolkit.calculate_annual_projection(
        payload.monthly_distance, payload.efficiency, payload.price_per_liter
    )
    return _model_response(AnnualProjectionResponse.model_validate(asdict(projection)))


def _validated_payload(
    request: HttpRequest, model: type[RequestModel]
) -> RequestModel | JsonResponse:
    payload = _parse_json_payload(request)
    if isinstance(payload, JsonResponse):
        return payload

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        return JsonResponse(
            {
                "error": {
                    "code": "validation_error",
                    "message": "Invalid request payload",
                    "details": exc.errors(
                        include_url=False, include_context=False, include_input=False
                    ),
                }
            },
            status=400,
        )


def _parse_json_payload(request: HttpRequest) -> dict[str, Any] | JsonResponse:
    if not request.body:
        return {}

    try:
        payload = json.loads(request.body)
    except json.JSONDecodeError:
        return _error_response("invalid_json", "Request body must be valid JSON", status=400)

    if not isinstance(payload, dict):
        return _error_response("invalid_json", "JSON body must be an object", status=400)

    return payload


def _model_response(model: BaseModel) -> JsonResponse:
    return JsonResponse(model.model_dump(mode="json"), status=200)


def _error_response(code: str, message: str, status: int) -> JsonResponse:
    return JsonResponse({"error": {"code": code, "message": message}}, status=status)
