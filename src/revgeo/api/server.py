import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from revgeo.api.geocoding import ReverseGeocodingClient
from revgeo.engine.errors import DecodeError, TransportError
from revgeo.engine.models import (
    AddressResult,
    GeographicCoordinates,
    LocalCoordinates,
    UTMCoordinates,
)
from revgeo.engine.transform import CoordinateProjector
from revgeo.shared.config import settings
from revgeo.shared.constants import API_VERSION

logger = logging.getLogger("api")

app = FastAPI(title="RevGeo Reverse Geocoding API", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Built on first request so the app starts without a Mapbox token
_geocoding_client: Optional[ReverseGeocodingClient] = None


def get_geocoding_client() -> ReverseGeocodingClient:
    """Get geocoding client instance"""
    global _geocoding_client
    if _geocoding_client is None:
        if not settings.MAPBOX_ACCESS_TOKEN:
            raise HTTPException(
                status_code=503,
                detail="GEOCODER_NOT_CONFIGURED: MAPBOX_ACCESS_TOKEN required",
            )
        projector = CoordinateProjector.from_settings(settings)
        _geocoding_client = ReverseGeocodingClient.from_settings(projector, settings)
    return _geocoding_client


class FeatureOut(BaseModel):
    text: Optional[str] = None
    place_name: Optional[str] = None
    address: Optional[str] = None


class AddressResponse(BaseModel):
    geographic: GeographicCoordinates
    full_address: Optional[str] = None
    street: Optional[str] = None
    features: List[FeatureOut] = []


def _to_response(geographic: GeographicCoordinates, result: AddressResult) -> AddressResponse:
    return AddressResponse(
        geographic=geographic,
        full_address=result.full_address(),
        street=result.street(),
        features=[
            FeatureOut(text=f.short_text, place_name=f.full_place_name, address=f.house_number)
            for f in result.features
        ],
    )


async def _lookup(client: ReverseGeocodingClient, geographic: GeographicCoordinates) -> AddressResponse:
    try:
        result = await client.address_for_geographic(geographic)
    except TransportError as e:
        logger.error(f"Reverse geocoding transport error: {e}")
        raise HTTPException(status_code=502, detail=f"GEOCODER_TRANSPORT_ERROR: {e}")
    except DecodeError as e:
        logger.error(f"Reverse geocoding decode error: {e}")
        raise HTTPException(status_code=502, detail=f"GEOCODER_DECODE_ERROR: {e}")
    return _to_response(geographic, result)


def _project(convert, coordinates) -> GeographicCoordinates:
    # pydantic's ValidationError is a ValueError too
    try:
        return convert(coordinates)
    except ValueError as e:
        logger.warning(f"Projection failed for {coordinates}: {e}")
        raise HTTPException(status_code=422, detail=f"COORDINATES_OUT_OF_DOMAIN: {e}")


@app.get("/health")
def health_check():
    return {"status": "ok", "version": API_VERSION}


@app.post("/api/v1/reverse-geocode", response_model=AddressResponse)
async def reverse_geocode(
    request: GeographicCoordinates,
    client: ReverseGeocodingClient = Depends(get_geocoding_client),
):
    """
    Reverse geocoding: WGS84 coordinates → address

    Example: {"latitude": 53.54, "longitude": 10.01}
    """
    return await _lookup(client, request)


@app.post("/api/v1/reverse-geocode/utm", response_model=AddressResponse)
async def reverse_geocode_utm(
    request: UTMCoordinates,
    client: ReverseGeocodingClient = Depends(get_geocoding_client),
):
    """
    Reverse geocoding: UTM coordinates → address

    Example: {"east": 566000.0, "north": 5933000.0, "zone": 32}
    """
    geographic = _project(client.projector.projected_to_geographic, request)
    return await _lookup(client, geographic)


@app.post("/api/v1/reverse-geocode/local", response_model=AddressResponse)
async def reverse_geocode_local(
    request: LocalCoordinates,
    client: ReverseGeocodingClient = Depends(get_geocoding_client),
):
    """
    Reverse geocoding: scene-local coordinates → address

    Example: {"x": 12.5, "y": 0.0, "z": -40.0}
    """
    logger.debug(f"Given local coordinates -- x: {request.x}, y: {request.y}, z: {request.z}")
    geographic = _project(client.projector.local_to_geographic, request)
    logger.debug(f"Geographic coordinates -- latitude: {geographic.latitude}, longitude: {geographic.longitude}")
    return await _lookup(client, geographic)
