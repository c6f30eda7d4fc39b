# navmap/services/geocoding.py

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from navmap.config import HTTP_TIMEOUT, NOMINATIM_URL, NOMINATIM_USER_AGENT
from navmap.errors import NotFoundError, UpstreamError, ValidationError
from navmap.models import LatLng

logger = logging.getLogger(__name__)


def parse_coordinates(raw_lat: Any, raw_lng: Any) -> LatLng:
    """
    Convierte lat/lon tal como vienen del servicio externo (Nominatim los manda
    como strings) a un LatLng validado. Cualquier valor no numérico, infinito o
    fuera de rango se considera una respuesta mal formada.
    """
    try:
        return LatLng(lat=raw_lat, lng=raw_lng)
    except PydanticValidationError as exc:
        raise UpstreamError(f"Invalid coordinates from upstream: lat={raw_lat!r}, lon={raw_lng!r}") from exc


class NominatimGeocoder:
    """
    Cliente de Nominatim para geocodificación directa (/search) e inversa (/reverse).
    No guarda estado entre llamadas ni cachea resultados.
    """

    def __init__(
        self,
        base_url: str = NOMINATIM_URL,
        user_agent: str = NOMINATIM_USER_AGENT,
        timeout: float = HTTP_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._client = client

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"User-Agent": self.user_agent}
        try:
            if self._client is not None:
                resp = await self._client.get(url, params=params, headers=headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Nominatim request to {path} failed: {exc}") from exc
        except ValueError as exc:
            # cuerpo que no es JSON
            raise UpstreamError(f"Nominatim returned a non-JSON body for {path}") from exc

    async def resolve_address(self, address: Optional[str]) -> LatLng:
        """
        Geocodifica `address` y regresa el primer resultado.

        - ValidationError si `address` falta o está vacío (no se llama a Nominatim).
        - NotFoundError si Nominatim no encuentra nada.
        - UpstreamError para fallos de red, status no-2xx o cuerpos mal formados.
        """
        query = (address or "").strip()
        if not query:
            raise ValidationError("Address is missing or empty")

        data = await self._get_json("/search", {"format": "json", "q": query})

        if not isinstance(data, list):
            raise UpstreamError(f"Unexpected Nominatim search payload: {type(data).__name__}")
        if len(data) == 0:
            raise NotFoundError(f"No results for address {query!r}")

        first = data[0]
        if not isinstance(first, dict):
            raise UpstreamError("Unexpected Nominatim search item")

        coords = parse_coordinates(first.get("lat"), first.get("lon"))
        logger.debug("Resolved %r -> (%s, %s)", query, coords.lat, coords.lng)
        return coords

    async def reverse_lookup(self, coords: LatLng) -> str:
        """Regresa el `display_name` de Nominatim para unas coordenadas."""
        data = await self._get_json(
            "/reverse",
            {"format": "json", "lat": coords.lat, "lon": coords.lng},
        )
        name = data.get("display_name") if isinstance(data, dict) else None
        if not name:
            raise NotFoundError(f"No display name for ({coords.lat}, {coords.lng})")
        return name
