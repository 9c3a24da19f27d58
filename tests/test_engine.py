"""
Unit tests for the coordinate projector and the address models.
"""

import math

import pytest
from pydantic import ValidationError

from revgeo.engine.models import (
    AddressResult,
    Feature,
    GeocodingRequestConfig,
    GeographicCoordinates,
    LocalCoordinates,
    UTMCoordinates,
)
from revgeo.engine.transform import CoordinateProjector, utm_epsg
from revgeo.shared.constants import MAPBOX_ENDPOINT


@pytest.fixture
def equator_projector():
    # Central meridian of zone 32N is 9°E; (500000, 0) sits on it at the equator
    return CoordinateProjector(UTMCoordinates(east=500000.0, north=0.0, zone=32))


def test_utm_epsg_codes():
    assert utm_epsg(32) == "EPSG:32632"
    assert utm_epsg(33, northern_hemisphere=False) == "EPSG:32733"


def test_projected_to_geographic_central_meridian(equator_projector):
    geo = equator_projector.projected_to_geographic(UTMCoordinates(east=500000.0, north=0.0, zone=32))
    assert geo.latitude == pytest.approx(0.0, abs=1e-7)
    assert geo.longitude == pytest.approx(9.0, abs=1e-7)


def test_projected_to_geographic_southern_hemisphere(equator_projector):
    utm = UTMCoordinates(east=500000.0, north=10000000.0, zone=33, northern_hemisphere=False)
    geo = equator_projector.projected_to_geographic(utm)
    assert geo.latitude == pytest.approx(0.0, abs=1e-7)
    assert geo.longitude == pytest.approx(15.0, abs=1e-7)


def test_local_to_projected_offsets_origin():
    projector = CoordinateProjector(UTMCoordinates(east=566000.0, north=5933000.0, zone=32))
    utm = projector.local_to_projected(LocalCoordinates(x=12.5, y=100.0, z=-40.0))
    assert utm.east == 566012.5
    assert utm.north == 5932960.0
    assert utm.zone == 32
    assert utm.northern_hemisphere is True


def test_local_to_geographic_axes(equator_projector):
    origin = equator_projector.local_to_geographic(LocalCoordinates(x=0.0, y=5.0, z=0.0))
    assert origin.latitude == pytest.approx(0.0, abs=1e-7)
    assert origin.longitude == pytest.approx(9.0, abs=1e-7)

    east = equator_projector.local_to_geographic(LocalCoordinates(x=1000.0, z=0.0))
    assert east.longitude > 9.0
    assert east.latitude == pytest.approx(0.0, abs=1e-6)

    north = equator_projector.local_to_geographic(LocalCoordinates(x=0.0, z=1000.0))
    assert north.latitude > 0.0
    assert north.longitude == pytest.approx(9.0, abs=1e-7)


def test_geographic_to_projected_and_back():
    projector = CoordinateProjector(UTMCoordinates(east=566000.0, north=5933000.0, zone=32))
    hamburg = GeographicCoordinates(latitude=53.54, longitude=10.01)

    utm = projector.geographic_to_projected(hamburg)
    assert utm.zone == 32
    assert 500000.0 < utm.east < 600000.0

    back = projector.projected_to_geographic(utm)
    assert back.latitude == pytest.approx(53.54, abs=1e-7)
    assert back.longitude == pytest.approx(10.01, abs=1e-7)


def test_projector_requires_origin():
    with pytest.raises(ValueError):
        CoordinateProjector(None)


def test_coordinates_reject_non_finite_values():
    with pytest.raises(ValidationError):
        GeographicCoordinates(latitude=math.nan, longitude=10.0)
    with pytest.raises(ValidationError):
        UTMCoordinates(east=math.inf, north=0.0, zone=32)


def test_utm_zone_out_of_range():
    with pytest.raises(ValidationError):
        UTMCoordinates(east=500000.0, north=0.0, zone=61)


def test_request_config_defaults_and_immutability():
    config = GeocodingRequestConfig(access_token="T")
    assert config.endpoint_base_url == MAPBOX_ENDPOINT
    assert config.query_type == "address"
    with pytest.raises(ValidationError):
        config.access_token = "other"


def test_request_config_requires_token():
    with pytest.raises(ValidationError):
        GeocodingRequestConfig()
    with pytest.raises(ValidationError):
        GeocodingRequestConfig(access_token="")


def test_empty_features_have_no_address():
    result = AddressResult.model_validate_json('{"features": []}')
    assert result.features == []
    assert result.full_address() is None
    assert result.street() is None


def test_first_feature_wins():
    result = AddressResult.model_validate_json(
        '{"features": [{"place_name": "A"}, {"place_name": "B"}]}'
    )
    assert result.full_address() == "A"


def test_feature_fields_map_from_mapbox_names():
    payload = {
        "type": "FeatureCollection",
        "features": [
            {
                "id": "address.123",
                "text": "Jungfernstieg",
                "place_name": "Jungfernstieg 7, 20354 Hamburg, Germany",
                "address": "7",
                "center": [9.99, 53.55],
            }
        ],
    }
    result = AddressResult.model_validate(payload)
    feature = result.features[0]
    assert feature.short_text == "Jungfernstieg"
    assert feature.house_number == "7"
    assert result.full_address() == "Jungfernstieg 7, 20354 Hamburg, Germany"
    assert result.street() == "Jungfernstieg 7"


def test_street_with_missing_parts_renders_empty_strings():
    assert AddressResult(features=[Feature(short_text="Main Street")]).street() == "Main Street "
    assert AddressResult(features=[Feature(house_number="12")]).street() == " 12"
    assert AddressResult(features=[Feature()]).street() == " "


def test_missing_features_does_not_validate():
    with pytest.raises(ValidationError):
        AddressResult.model_validate_json("{}")
    with pytest.raises(ValidationError):
        AddressResult.model_validate_json('{"features": null}')


def test_projected_to_geographic_rejects_unprojectable_points(equator_projector):
    with pytest.raises(ValueError):
        equator_projector.projected_to_geographic(UTMCoordinates(east=1e12, north=1e12, zone=32))
