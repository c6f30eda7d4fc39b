"""Tests for the Nominatim geocoder and coordinate validation."""

import pytest

from navmap.errors import NotFoundError, UpstreamError, ValidationError
from navmap.models import LatLng
from navmap.services.geocoding import parse_coordinates


@pytest.mark.asyncio
@pytest.mark.parametrize("address", [None, "", "   "])
async def test_missing_address_makes_no_upstream_call(geocoder, fake_nominatim, address):
    with pytest.raises(ValidationError):
        await geocoder.resolve_address(address)
    assert fake_nominatim.requests == []


@pytest.mark.asyncio
async def test_address_is_stripped_before_lookup(geocoder, fake_nominatim):
    coords = await geocoder.resolve_address("  Mumbai ")
    assert coords == LatLng(lat=19.0760, lng=72.8777)
    assert fake_nominatim.requests[0].url.params["q"] == "Mumbai"


@pytest.mark.asyncio
async def test_zero_matches_is_not_found_not_upstream(geocoder):
    with pytest.raises(NotFoundError):
        await geocoder.resolve_address("zzzznotaplace")


@pytest.mark.asyncio
async def test_object_payload_is_upstream_error(geocoder, fake_nominatim):
    fake_nominatim.raw_body = '{"error": "bad request"}'
    with pytest.raises(UpstreamError):
        await geocoder.resolve_address("Delhi")


@pytest.mark.asyncio
async def test_reverse_lookup_returns_display_name(geocoder, fake_nominatim):
    name = await geocoder.reverse_lookup(LatLng(lat=28.6315, lng=77.2167))
    assert name == "Connaught Place, New Delhi, India"

    request = fake_nominatim.requests[0]
    assert request.url.path == "/reverse"
    assert float(request.url.params["lat"]) == pytest.approx(28.6315)
    assert float(request.url.params["lon"]) == pytest.approx(77.2167)


@pytest.mark.asyncio
async def test_reverse_lookup_without_name_is_not_found(geocoder, fake_nominatim):
    fake_nominatim.reverse_name = None
    with pytest.raises(NotFoundError):
        await geocoder.reverse_lookup(LatLng(lat=0.0, lng=0.0))


def test_parse_coordinates_accepts_numeric_strings():
    assert parse_coordinates("-33.8688", "151.2093") == LatLng(lat=-33.8688, lng=151.2093)


@pytest.mark.parametrize(
    "lat,lng",
    [
        ("abc", "10"),
        (None, "10"),
        ("10", None),
        ("nan", "10"),
        ("10", "inf"),
        (91, 0),
        (0, -180.5),
    ],
)
def test_parse_coordinates_rejects_invalid_values(lat, lng):
    with pytest.raises(UpstreamError):
        parse_coordinates(lat, lng)
