"""Errors raised by reverse geocoding lookups."""

from typing import Optional


class GeocodingError(Exception):
    """Base class for failed lookups"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(GeocodingError):
    """The request did not complete with a 2xx response"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DecodeError(GeocodingError):
    """The response body is not a valid address payload"""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body
