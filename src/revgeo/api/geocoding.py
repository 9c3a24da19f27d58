"""
RevGeo: Mapbox Reverse Geocoding Client

Resolves coordinates from any of the three coordinate spaces to an address:
1. local / UTM coordinates are projected to WGS84 first,
2. one GET is sent to the Mapbox reverse geocoding endpoint,
3. the JSON body is validated into an AddressResult.

Results are not checked for plausibility. Failed requests raise
TransportError, unreadable bodies raise DecodeError; nothing is retried.

Usage:
    projector = CoordinateProjector(origin)
    client = ReverseGeocodingClient(projector, GeocodingRequestConfig(access_token="pk..."))
    address = await client.address_for_local(LocalCoordinates(x=12.0, z=-4.5))
    address.full_address()
"""

import asyncio
import logging
from decimal import Decimal
from typing import Optional

import aiohttp
from pydantic import ValidationError
from yarl import URL

from revgeo.engine.errors import DecodeError, TransportError
from revgeo.engine.models import (
    AddressResult,
    GeocodingRequestConfig,
    GeographicCoordinates,
    LocalCoordinates,
    UTMCoordinates,
)
from revgeo.engine.transform import GeographicConverter
from revgeo.shared.constants import REQUEST_HEADERS

logger = logging.getLogger("Geocoding")


def _format_degrees(value: float) -> str:
    """Shortest decimal form of a float, never in exponent notation (1e-05 -> 0.00001)"""
    return format(Decimal(repr(value)), "f")


def build_request_url(latitude: float, longitude: float, config: GeocodingRequestConfig) -> str:
    """
    Reverse geocoding URL for one coordinate pair.
    The path segment is {lon},{lat}: longitude comes first.
    """
    endpoint = config.endpoint_base_url
    separator = "" if endpoint.endswith("/") else "/"
    return (
        f"{endpoint}{separator}{_format_degrees(longitude)},{_format_degrees(latitude)}.json"
        f"?types={config.query_type}&access_token={config.access_token}"
    )


class ReverseGeocodingClient:
    """
    Reverse geocoding against Mapbox
    """

    def __init__(
        self,
        projector: GeographicConverter,
        config: GeocodingRequestConfig,
        session: Optional[aiohttp.ClientSession] = None,
        verbose_logging: bool = False,
    ):
        """
        Args:
            projector: converts UTM and local coordinates to geographic ones
            config: endpoint and access token used for every request
            session: caller-owned aiohttp session; one is opened per request if omitted
            verbose_logging: log raw response bodies and attach them to DecodeError
        """
        if projector is None:
            raise ValueError(
                "A coordinate projector is required. Pass a CoordinateProjector "
                "built from the UTM coordinates of the local origin."
            )
        if config is None:
            raise ValueError("A GeocodingRequestConfig with a Mapbox access token is required")
        self.projector = projector
        self.config = config
        self.verbose_logging = verbose_logging
        self._session = session

    @classmethod
    def from_settings(cls, projector, settings, session=None) -> "ReverseGeocodingClient":
        config = GeocodingRequestConfig(
            endpoint_base_url=settings.MAPBOX_ENDPOINT,
            access_token=settings.MAPBOX_ACCESS_TOKEN,
        )
        return cls(projector, config, session=session, verbose_logging=settings.VERBOSE_LOGGING)

    async def fetch_address(self, latitude: float, longitude: float) -> AddressResult:
        """
        Request the address at the given WGS84 coordinates.

        Raises:
            TransportError: the request failed or returned a non-2xx status
            DecodeError: the body is not JSON or has no features list
        """
        url = build_request_url(latitude, longitude, self.config)

        if self._session is not None:
            body = await self._get(self._session, url)
        else:
            async with aiohttp.ClientSession() as session:
                body = await self._get(session, url)

        text = body.decode("utf-8", errors="replace") if self.verbose_logging else None
        if self.verbose_logging:
            logger.info(f"Success request for lon {longitude} and lat {latitude}: {text}")

        # bytes in: invalid UTF-8 is reported as a ValidationError like any other bad body
        try:
            return AddressResult.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response body: {e}",
                body=text,
            ) from e

    async def _get(self, session: aiohttp.ClientSession, url: str) -> bytes:
        # encoded=True keeps the URL byte-for-byte as built (no re-quoting of the path or token)
        try:
            async with session.get(URL(url, encoded=True), headers=REQUEST_HEADERS) as resp:
                if not 200 <= resp.status < 300:
                    raise TransportError(
                        f"Web request failed: {resp.status} {resp.reason}",
                        status=resp.status,
                    )
                return await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Web request failed: {e!r}") from e

    async def address_for_geographic(self, geographic: GeographicCoordinates) -> AddressResult:
        return await self.fetch_address(latitude=geographic.latitude, longitude=geographic.longitude)

    async def address_for_utm(self, utm: UTMCoordinates) -> AddressResult:
        geographic = self.projector.projected_to_geographic(utm)
        return await self.fetch_address(latitude=geographic.latitude, longitude=geographic.longitude)

    async def address_for_local(self, local: LocalCoordinates) -> AddressResult:
        geographic = self.projector.local_to_geographic(local)
        return await self.fetch_address(latitude=geographic.latitude, longitude=geographic.longitude)
