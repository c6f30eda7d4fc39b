# navmap/services/proxy_client.py

from typing import Optional

import httpx

from navmap.config import HTTP_TIMEOUT, PROXY_URL
from navmap.errors import NotFoundError, UpstreamError, ValidationError
from navmap.models import LatLng
from navmap.services.geocoding import parse_coordinates


class ProxyClient:
    """
    Lo que usa el workflow del mapa para resolver direcciones: llama a nuestro
    propio GET /geocode y traduce los status HTTP de vuelta a la taxonomía de errores.
    """

    def __init__(
        self,
        base_url: str = PROXY_URL,
        timeout: float = HTTP_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def resolve_address(self, address: str) -> LatLng:
        url = f"{self.base_url}/geocode"
        params = {"address": address}
        try:
            if self._client is not None:
                resp = await self._client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Geocode proxy unreachable: {exc}") from exc

        if resp.status_code == 400:
            raise ValidationError(f"Proxy rejected address {address!r}")
        if resp.status_code == 404:
            raise NotFoundError(f"Location not found: {address!r}")
        if resp.status_code != 200:
            raise UpstreamError(f"Geocode proxy answered {resp.status_code}")

        try:
            data = resp.json()
            return parse_coordinates(data["lat"], data["lng"])
        except (ValueError, KeyError, TypeError) as exc:
            raise UpstreamError("Malformed geocode proxy response") from exc
