"""Reverse geocoding of local, UTM and geographic coordinates via Mapbox"""

from revgeo.api.geocoding import ReverseGeocodingClient, build_request_url
from revgeo.engine.errors import DecodeError, GeocodingError, TransportError
from revgeo.engine.models import (
    AddressResult,
    Feature,
    GeocodingRequestConfig,
    GeographicCoordinates,
    LocalCoordinates,
    UTMCoordinates,
)
from revgeo.engine.transform import CoordinateProjector, GeographicConverter

__all__ = [
    "AddressResult",
    "CoordinateProjector",
    "DecodeError",
    "Feature",
    "GeocodingError",
    "GeocodingRequestConfig",
    "GeographicConverter",
    "GeographicCoordinates",
    "LocalCoordinates",
    "ReverseGeocodingClient",
    "TransportError",
    "UTMCoordinates",
    "build_request_url",
]
