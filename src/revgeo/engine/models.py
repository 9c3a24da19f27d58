"""
Coordinate and address models.

The three coordinate spaces a lookup can start from, the immutable request
configuration, and the address record parsed from a Mapbox response.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from revgeo.shared.constants import MAPBOX_ENDPOINT, QUERY_TYPE_ADDRESS, UTM_ZONE_RANGE


class GeographicCoordinates(BaseModel):
    """WGS84 latitude/longitude in decimal degrees"""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., allow_inf_nan=False, description="Latitude in decimal degrees")
    longitude: float = Field(..., allow_inf_nan=False, description="Longitude in decimal degrees")


class UTMCoordinates(BaseModel):
    """WGS84 / UTM projected coordinates"""

    model_config = ConfigDict(frozen=True)

    east: float = Field(..., allow_inf_nan=False, description="Easting in meters")
    north: float = Field(..., allow_inf_nan=False, description="Northing in meters")
    zone: int = Field(..., ge=UTM_ZONE_RANGE[0], le=UTM_ZONE_RANGE[1])
    northern_hemisphere: bool = True


class LocalCoordinates(BaseModel):
    """
    Scene-local cartesian coordinates in meters from the scene origin.
    x points east, z points north, y is height and plays no part in projection.
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(0.0, allow_inf_nan=False)
    z: float = Field(..., allow_inf_nan=False)


class GeocodingRequestConfig(BaseModel):
    """Endpoint and credentials for one reverse geocoding client"""

    model_config = ConfigDict(frozen=True)

    endpoint_base_url: str = Field(MAPBOX_ENDPOINT, min_length=1)
    access_token: str = Field(..., min_length=1)
    query_type: Literal["address"] = QUERY_TYPE_ADDRESS


class Feature(BaseModel):
    """A single candidate address returned by Mapbox"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_text: Optional[str] = Field(None, alias="text", description="Street name")
    full_place_name: Optional[str] = Field(None, alias="place_name", description="Full address")
    house_number: Optional[str] = Field(None, alias="address", description="House number")


class AddressResult(BaseModel):
    """
    Parsed reverse geocoding response.

    An empty ``features`` list means no address was found. A response without
    ``features`` does not validate.
    """

    model_config = ConfigDict(frozen=True)

    features: List[Feature]

    def full_address(self) -> Optional[str]:
        """Full place name of the best match, None when nothing matched"""
        return self.features[0].full_place_name if self.features else None

    def street(self) -> Optional[str]:
        """
        Street name and house number of the best match, None when nothing matched.

        Missing parts render as empty strings, so a feature with only a street
        name yields "Main Street " (trailing space kept).
        """
        if not self.features:
            return None
        first = self.features[0]
        return f"{first.short_text or ''} {first.house_number or ''}"
