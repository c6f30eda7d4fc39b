"""Pytest configuration and fixtures for the proxy and map workflow tests."""

from typing import Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from navmap.api.routes_geocode import get_geocoder
from navmap.main import app
from navmap.models import LatLng
from navmap.services.geocoding import NominatimGeocoder

NOMINATIM_TEST_URL = "https://nominatim.test"
OSRM_TEST_URL = "https://osrm.test"
TEST_USER_AGENT = "navmap-tests/1.0"

DELHI = LatLng(lat=28.6139, lng=77.2090)
MUMBAI = LatLng(lat=19.0760, lng=72.8777)


class FakeNominatim:
    """In-memory stand-in for Nominatim's /search and /reverse endpoints."""

    def __init__(self):
        self.places: Dict[str, List[dict]] = {
            "Delhi": [{"lat": "28.6139", "lon": "77.2090", "display_name": "Delhi, India"}],
            "Mumbai": [{"lat": "19.0760", "lon": "72.8777", "display_name": "Mumbai, India"}],
        }
        self.reverse_name: Optional[str] = "Connaught Place, New Delhi, India"
        self.status_code = 200
        self.raw_body: Optional[str] = None
        self.network_error = False
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.network_error:
            raise httpx.ConnectError("connection refused", request=request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "upstream exploded"})
        if self.raw_body is not None:
            return httpx.Response(200, text=self.raw_body)

        if request.url.path == "/search":
            return httpx.Response(200, json=self.places.get(request.url.params.get("q"), []))
        if request.url.path == "/reverse":
            body = {"display_name": self.reverse_name} if self.reverse_name else {"error": "Unable to geocode"}
            return httpx.Response(200, json=body)
        return httpx.Response(404, json={})


@pytest.fixture
def fake_nominatim() -> FakeNominatim:
    return FakeNominatim()


@pytest_asyncio.fixture
async def geocoder(fake_nominatim):
    """NominatimGeocoder wired to the fake upstream."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_nominatim.handler)) as upstream:
        yield NominatimGeocoder(
            base_url=NOMINATIM_TEST_URL,
            user_agent=TEST_USER_AGENT,
            client=upstream,
        )


@pytest_asyncio.fixture
async def client(geocoder):
    """Async test client for the FastAPI app, with Nominatim faked."""
    app.dependency_overrides[get_geocoder] = lambda: geocoder

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
