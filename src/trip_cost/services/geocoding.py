from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from django.conf import settings

from trip_cost.exceptions import (
    GeocodingNetworkError,
    GeocodingParseError,
    LocationNotFoundError,
)
from trip_cost.services.types import GeoPoint

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    def geocode(self, query: str) -> GeoPoint: ...


class GeocodingClient:
    def __init__(self) -> None:
        self.base_url = settings.GEOCODING_BASE_URL.rstrip("/")
        self.timeout = settings.GEOCODING_TIMEOUT_SECONDS
        self.user_agent = settings.GEOCODING_USER_AGENT
        self.country_suffix = settings.GEOCODING_COUNTRY_SUFFIX
        self.country_code = settings.GEOCODING_COUNTRY_CODE

    def geocode(self, query: str) -> GeoPoint:
        params = {
            "q": self._qualified_query(query),
            "format": "json",
            "limit": 1,
        }
        if self.country_code:
            params["countrycodes"] = self.country_code

        logger.debug("Geocoding %r", params["q"])
        try:
            response = httpx.get(
                f"{self.base_url}/search",
                params=params,
                timeout=self.timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.user_agent,
                },
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Geocoding request for %r failed: %s", query, exc)
            raise GeocodingNetworkError("Geocoding request failed", query=query) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise GeocodingParseError("Geocoding response is not valid JSON", query=query) from exc

        return self._parse_result(payload, query)

    def _qualified_query(self, query: str) -> str:
        query = query.strip()
        if not self.country_suffix:
            return query
        return f"{query}, {self.country_suffix}"

    @staticmethod
    def _parse_result(payload: Any, query: str) -> GeoPoint:
        if not isinstance(payload, list):
            raise GeocodingParseError("Unexpected geocoding response", query=query)
        if not payload:
            raise LocationNotFoundError("Location not found", query=query)

        first = payload[0]
        try:
            latitude = float(first["lat"])
            longitude = float(first["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            raise GeocodingParseError("Invalid geocoding response", query=query) from exc

        return GeoPoint(latitude=latitude, longitude=longitude)
