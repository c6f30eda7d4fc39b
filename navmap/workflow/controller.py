# navmap/workflow/controller.py

import asyncio
import logging
from typing import Callable, List, Optional

from navmap.errors import DeviceError, NavMapError, NotFoundError
from navmap.models import LatLng
from navmap.services.geocoding import NominatimGeocoder
from navmap.services.proxy_client import ProxyClient
from navmap.services.routing import OsrmRouter
from navmap.workflow.geolocation import GeolocationProvider, StaticGeolocation
from navmap.workflow.map_view import MapView
from navmap.workflow.state import (
    Action,
    EditName,
    Endpoint,
    Phase,
    SelectTileStyle,
    SetCoords,
    SetLocation,
    Swap,
    TileStyle,
    WorkflowState,
    reduce,
)

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class MapWorkflow:
    """
    Controlador del mapa: recibe las acciones del usuario, las pasa por el
    reducer y mantiene el MapView sincronizado con el estado.

    Todo corre en un solo event loop. Cada resolución es una tarea independiente
    que solo escribe las coords de su propio extremo; la ruta se pide únicamente
    cuando ambos extremos están resueltos.

    Colaboradores (cualquier objeto con la misma forma sirve):
      - resolver.resolve_address(name) -> LatLng       (ProxyClient)
      - router.fetch_route(start, end) -> RouteOverlay (OsrmRouter)
      - reverse_geocoder.reverse_lookup(coords) -> str (NominatimGeocoder)
      - geolocation.current_position() -> LatLng      (GeolocationProvider)
    """

    def __init__(
        self,
        resolver=None,
        router=None,
        reverse_geocoder=None,
        geolocation: Optional[GeolocationProvider] = None,
        map_view: Optional[MapView] = None,
        notify: Optional[Notifier] = None,
    ):
        self.resolver = resolver if resolver is not None else ProxyClient()
        self.router = router if router is not None else OsrmRouter()
        self.reverse_geocoder = reverse_geocoder if reverse_geocoder is not None else NominatimGeocoder()
        self.geolocation = geolocation if geolocation is not None else StaticGeolocation()
        self.map_view = map_view if map_view is not None else MapView()
        self._notify = notify
        self._state = WorkflowState()
        self.notifications: List[str] = []

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    # --------- núcleo: reducer + sincronización ---------

    def _dispatch(self, action: Action) -> bool:
        """Aplica la acción y regresa True si hay que (re)dibujar la ruta."""
        prev = self._state
        self._state = reduce(prev, action)
        new = self._state

        self.map_view.set_tile_style(new.tile_style)
        self.map_view.set_markers(new.start.coords, new.end.coords)

        if new.phase != Phase.BOTH_RESOLVED:
            # sin ambos extremos no puede quedar ninguna ruta en el mapa
            self.map_view.clear_route()
            return False

        return (prev.start.coords, prev.end.coords) != (new.start.coords, new.end.coords)

    async def _apply(self, action: Action) -> None:
        if self._dispatch(action):
            await self.draw_route()

    def _report(self, message: str, exc: Optional[Exception] = None) -> None:
        if exc is not None:
            logger.warning("%s (%s: %s)", message, type(exc).__name__, exc)
        else:
            logger.warning(message)
        self.notifications.append(message)
        if self._notify is not None:
            self._notify(message)

    # --------- acciones del usuario ---------

    def edit_name(self, endpoint: Endpoint, name: str) -> None:
        self._dispatch(EditName(endpoint=endpoint, name=name))

    def edit_start(self, name: str) -> None:
        self.edit_name("start", name)

    def edit_end(self, name: str) -> None:
        self.edit_name("end", name)

    def select_tile_style(self, style: TileStyle) -> None:
        self._dispatch(SelectTileStyle(style=TileStyle(style)))

    async def swap(self) -> None:
        await self._apply(Swap())

    async def resolve(self) -> None:
        """Resuelve en paralelo los nombres pendientes que no estén vacíos."""
        tasks = []
        for endpoint in ("start", "end"):
            name = self._state.location(endpoint).name.strip()
            if name:
                tasks.append(self._resolve_one(endpoint, name))
        if tasks:
            await asyncio.gather(*tasks)

    async def _resolve_one(self, endpoint: Endpoint, name: str) -> None:
        try:
            coords = await self.resolver.resolve_address(name)
        except NotFoundError as exc:
            self._report(f"Location not found: {name}", exc)
            return
        except NavMapError as exc:
            self._report(f"Error fetching coordinates for {name}", exc)
            return

        logger.info("Resolved %s location %r -> (%s, %s)", endpoint, name, coords.lat, coords.lng)
        await self._apply(SetCoords(endpoint=endpoint, coords=coords))

    async def use_current_location(self) -> None:
        try:
            position = await self.geolocation.current_position()
        except DeviceError as exc:
            self._report("Unable to fetch location. Please allow location access.", exc)
            return

        # el nombre se pide en paralelo; la ruta no tiene que esperar por él
        name_task = asyncio.create_task(self._display_name(position))
        await self._apply(SetCoords(endpoint="start", coords=position))
        name = await name_task

        # mientras llegaba el nombre pudo haber un swap o una nueva resolución:
        # el nombre va con el extremo que todavía tiene esta posición
        for endpoint in ("start", "end"):
            if self._state.location(endpoint).coords == position:
                self._dispatch(SetLocation(endpoint=endpoint, name=name, coords=position))
                return
        logger.debug("Dropping reverse lookup name %r, position no longer on the map", name)

    async def _display_name(self, position: LatLng) -> str:
        try:
            return await self.reverse_geocoder.reverse_lookup(position)
        except NavMapError as exc:
            logger.warning("Reverse lookup failed, using raw coordinates: %s", exc)
            return f"{position.lat}, {position.lng}"

    # --------- ruta ---------

    async def draw_route(self) -> None:
        """
        Pide la ruta entre los dos extremos actuales y la deja como la única del mapa.
        La ruta previa se quita antes de pedir la nueva; si la petición falla el mapa
        se queda sin ruta. Una respuesta cuyos extremos ya no son los del estado actual
        se descarta.
        """
        start, end = self._state.start.coords, self._state.end.coords
        if start is None or end is None:
            self.map_view.clear_route()
            return

        self.map_view.clear_route()
        try:
            overlay = await self.router.fetch_route(start, end)
        except NavMapError as exc:
            self._report("Error fetching route", exc)
            return

        if (self._state.start.coords, self._state.end.coords) != (start, end):
            logger.debug("Discarding route for superseded endpoints")
            return

        self.map_view.set_route(overlay)
