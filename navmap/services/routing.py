# navmap/services/routing.py
#
# Cliente de OSRM: arma la URL (lon,lat), pide la geometría completa y
# normaliza la respuesta a un RouteOverlay en (lat, lng).

import logging
from typing import Any, List, Optional

import httpx

from navmap.config import HTTP_TIMEOUT, OSRM_PROFILE, OSRM_URL
from navmap.errors import NotFoundError, UpstreamError
from navmap.models import LatLng, RouteOverlay
from navmap.services.geocoding import parse_coordinates

logger = logging.getLogger(__name__)


def format_coordinates(coords: List[LatLng]) -> str:
    """Convierte [(lat, lng), ...] al formato de OSRM 'lng,lat;lng,lat;...'."""
    return ";".join(f"{c.lng},{c.lat}" for c in coords)


class OsrmRouter:
    def __init__(
        self,
        base_url: str = OSRM_URL,
        profile: str = OSRM_PROFILE,
        timeout: float = HTTP_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.timeout = timeout
        self._client = client

    def route_url(self, start: LatLng, end: LatLng) -> str:
        return f"{self.base_url}/route/v1/{self.profile}/{format_coordinates([start, end])}"

    async def _get_json(self, url: str) -> Any:
        params = {"overview": "full", "geometries": "geojson"}
        try:
            if self._client is not None:
                resp = await self._client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as exc:
            raise UpstreamError(f"OSRM request failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamError("OSRM returned a non-JSON body") from exc

    async def fetch_route(self, start: LatLng, end: LatLng) -> RouteOverlay:
        """
        Pide la ruta en coche entre `start` y `end` y regresa la primera candidata.

        OSRM manda la geometría GeoJSON como [lng, lat]; aquí se voltea a (lat, lng).
        Lista de rutas vacía -> NotFoundError. Red/JSON/forma inesperada -> UpstreamError.
        """
        data = await self._get_json(self.route_url(start, end))
        if not isinstance(data, dict):
            raise UpstreamError("Unexpected OSRM payload")

        routes = data.get("routes") or []
        if data.get("code", "Ok") != "Ok" or len(routes) == 0:
            raise NotFoundError(f"OSRM found no route: {data.get('message', data.get('code'))}")

        # tomamos la primera ruta (OSRM puede regresar varias)
        try:
            raw_coords = routes[0]["geometry"]["coordinates"]
            points = [parse_coordinates(lat, lng) for lng, lat in raw_coords]
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamError("Malformed OSRM route geometry") from exc

        if not points:
            raise NotFoundError("OSRM route has no geometry")

        logger.debug("OSRM route with %d points", len(points))
        return RouteOverlay.from_points(points)
