"""
Coordinate Transformation Utilities relying on pyproj.

Converts scene-local cartesian coordinates and WGS84 / UTM projected
coordinates (EPSG:326xx / EPSG:327xx) to geographic coordinates (EPSG:4326)
and back.
"""

import logging
import math
from functools import lru_cache
from typing import Protocol

from pyproj import Transformer

from revgeo.engine.models import GeographicCoordinates, LocalCoordinates, UTMCoordinates
from revgeo.shared.constants import EPSG_UTM_NORTH_BASE, EPSG_UTM_SOUTH_BASE, EPSG_WGS84

logger = logging.getLogger("Transform")


class GeographicConverter(Protocol):
    """What the geocoding client needs from a projector"""

    def projected_to_geographic(self, utm: UTMCoordinates) -> GeographicCoordinates: ...

    def local_to_geographic(self, local: LocalCoordinates) -> GeographicCoordinates: ...


def utm_epsg(zone: int, northern_hemisphere: bool = True) -> str:
    base = EPSG_UTM_NORTH_BASE if northern_hemisphere else EPSG_UTM_SOUTH_BASE
    return f"EPSG:{base + zone}"


# One transformer pair per UTM zone, built on first use.
# always_xy=True forces input/output to be (lon, lat) / (x, y) rather than (lat, lon)
@lru_cache(maxsize=None)
def _to_wgs84(crs: str) -> Transformer:
    return Transformer.from_crs(crs, EPSG_WGS84, always_xy=True)


@lru_cache(maxsize=None)
def _from_wgs84(crs: str) -> Transformer:
    return Transformer.from_crs(EPSG_WGS84, crs, always_xy=True)


class CoordinateProjector:
    """
    Projects between the local scene, UTM and geographic coordinate spaces.

    The origin is the UTM position of the local scene origin. Local x is
    added to the easting and local z to the northing; local y (height) is
    ignored.
    """

    def __init__(self, origin: UTMCoordinates):
        if origin is None:
            raise ValueError("CoordinateProjector requires the UTM coordinates of the local origin")
        self.origin = origin
        self.crs = utm_epsg(origin.zone, origin.northern_hemisphere)

    @classmethod
    def from_settings(cls, settings) -> "CoordinateProjector":
        return cls(
            UTMCoordinates(
                east=settings.ORIGIN_UTM_EAST,
                north=settings.ORIGIN_UTM_NORTH,
                zone=settings.ORIGIN_UTM_ZONE,
                northern_hemisphere=settings.ORIGIN_UTM_NORTHERN,
            )
        )

    def local_to_projected(self, local: LocalCoordinates) -> UTMCoordinates:
        return UTMCoordinates(
            east=self.origin.east + local.x,
            north=self.origin.north + local.z,
            zone=self.origin.zone,
            northern_hemisphere=self.origin.northern_hemisphere,
        )

    def projected_to_geographic(self, utm: UTMCoordinates) -> GeographicCoordinates:
        """
        Transform UTM (east, north) to EPSG:4326 (lat, lng).
        always_xy returns (lon, lat).
        """
        crs = utm_epsg(utm.zone, utm.northern_hemisphere)
        lon, lat = _to_wgs84(crs).transform(xx=utm.east, yy=utm.north)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"UTM zone {utm.zone} ({utm.east}, {utm.north}) has no geographic equivalent")
        return GeographicCoordinates(latitude=lat, longitude=lon)

    def geographic_to_projected(self, geo: GeographicCoordinates) -> UTMCoordinates:
        """
        Transform EPSG:4326 (lat, lng) to UTM in the origin's zone.
        always_xy expects (lon, lat) order!
        """
        east, north = _from_wgs84(self.crs).transform(xx=geo.longitude, yy=geo.latitude)
        if not (math.isfinite(east) and math.isfinite(north)):
            raise ValueError(f"lat {geo.latitude}, lng {geo.longitude} cannot be projected to {self.crs}")
        return UTMCoordinates(
            east=east,
            north=north,
            zone=self.origin.zone,
            northern_hemisphere=self.origin.northern_hemisphere,
        )

    def local_to_geographic(self, local: LocalCoordinates) -> GeographicCoordinates:
        utm = self.local_to_projected(local)
        geo = self.projected_to_geographic(utm)
        logger.debug(
            f"local ({local.x}, {local.y}, {local.z}) -> UTM {utm.zone} ({utm.east}, {utm.north})"
            f" -> lat {geo.latitude}, lng {geo.longitude}"
        )
        return geo
