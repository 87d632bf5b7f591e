from __future__ import annotations


class TripCostError(Exception):
    """Base exception for trip cost estimation errors."""


class GeocodingError(TripCostError):
    """Raised when a place name cannot be turned into coordinates."""

    def __init__(self, message: str, *, query: str | None = None, location: str | None = None):
        super().__init__(message)
        self.query = query
        self.location = location

    def with_location(self, location: str) -> GeocodingError:
        return type(self)(
            f"failed to geocode {location}: {self}", query=self.query, location=location
        )


class LocationNotFoundError(GeocodingError):
    """Raised when the geocoding service returns no match."""


class GeocodingNetworkError(GeocodingError):
    """Raised when the geocoding request fails in transport."""


class GeocodingParseError(GeocodingError):
    """Raised when the geocoding response cannot be decoded."""


class InvalidTripInputError(TripCostError):
    """Raised when trip parameters cannot produce an estimate."""


class FuelPriceDataError(TripCostError):
    """Raised when a fuel price table cannot be loaded."""
