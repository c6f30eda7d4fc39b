# navmap/api/routes_geocode.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from navmap.models import ErrorResponse, GeocodeResponse
from navmap.services.geocoding import NominatimGeocoder

router = APIRouter(tags=["geocode"])


def get_geocoder() -> NominatimGeocoder:
    """Dependencia para poder sustituir el geocodificador en los tests."""
    return NominatimGeocoder()


@router.get(
    "/geocode",
    response_model=GeocodeResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def geocode(
    address: Optional[str] = Query(None, description="Dirección o lugar en texto libre"),
    geocoder: NominatimGeocoder = Depends(get_geocoder),
):
    """
    Resuelve `address` con Nominatim y regresa la primera coincidencia como {lat, lng}.
    Los errores los traducen a JSON los exception handlers de navmap.main.
    """
    coords = await geocoder.resolve_address(address)
    return GeocodeResponse(lat=coords.lat, lng=coords.lng)
