"""
Shared fakes: an aiohttp-like session that never touches the network and a
stub projector with a fixed geographic result.
"""

import pytest

from revgeo.engine.models import GeocodingRequestConfig, GeographicCoordinates


class FakeResponse:
    def __init__(self, body='{"features": []}', status: int = 200, reason: str = "OK"):
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status = status
        self.reason = reason

    async def read(self):
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records every GET; returns the canned response or raises the canned error"""

    def __init__(self, response: FakeResponse = None, error: Exception = None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def get(self, url, headers=None):
        self.calls.append({"url": str(url), "headers": headers})
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class StubProjector:
    def __init__(self, geographic: GeographicCoordinates):
        self.geographic = geographic
        self.calls = []

    def projected_to_geographic(self, utm):
        self.calls.append(("projected", utm))
        return self.geographic

    def local_to_geographic(self, local):
        self.calls.append(("local", local))
        return self.geographic


@pytest.fixture
def config():
    return GeocodingRequestConfig(endpoint_base_url="https://api.example.com/v5/places", access_token="T")


@pytest.fixture
def hamburg():
    return GeographicCoordinates(latitude=53.54, longitude=10.01)


@pytest.fixture
def projector(hamburg):
    return StubProjector(hamburg)
