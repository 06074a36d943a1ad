"""Response models for naver-maps-mcp."""

from .responses import (
    CoordinateModel,
    DirectionsResponse,
    ErrorResponse,
    GeocodeAddress,
    GeocodeResponse,
    OriginalAddressesModel,
    PlaceItem,
    PlacesResponse,
    ResolvedAddressModel,
    ReverseGeocodeEntry,
    ReverseGeocodeResponse,
    TransformResponse,
    format_response,
)

__all__ = [
    "CoordinateModel",
    "DirectionsResponse",
    "ErrorResponse",
    "GeocodeAddress",
    "GeocodeResponse",
    "OriginalAddressesModel",
    "PlaceItem",
    "PlacesResponse",
    "ResolvedAddressModel",
    "ReverseGeocodeEntry",
    "ReverseGeocodeResponse",
    "TransformResponse",
    "format_response",
]
