# navmap/workflow/map_view.py
#
# Widget del mapa: capa de tiles, marcadores y (a lo más) una ruta.
# Se dibuja con folium, que genera un documento Leaflet.

import logging
from typing import Optional, Tuple

import folium

from navmap.config import MAP_CENTER, MAP_ZOOM, ROUTE_STYLE, TILE_LAYERS
from navmap.models import Bounds, LatLng, RouteOverlay
from navmap.workflow.state import TileStyle

logger = logging.getLogger(__name__)

START_ICON_HTML = '<span style="font-size: 30px;">⚪</span>'
END_ICON_HTML = '<span style="font-size: 30px;">🚩</span>'


def _marker_icon(html: str) -> folium.DivIcon:
    return folium.DivIcon(html=html, icon_size=(40, 40), icon_anchor=(20, 40))


class MapView:
    """
    La ruta es un recurso único: `set_route` siempre libera la anterior antes de
    quedarse con la nueva, así nunca hay más de una polilínea en el mapa.
    Cambiar el estilo de tiles no toca ni marcadores ni ruta.
    """

    def __init__(self, center: Tuple[float, float] = MAP_CENTER, zoom: int = MAP_ZOOM):
        self.center = center
        self.zoom = zoom
        self.tile_style = TileStyle.NORMAL
        self.start_marker: Optional[LatLng] = None
        self.end_marker: Optional[LatLng] = None
        self.viewport: Optional[Bounds] = None
        self._route: Optional[RouteOverlay] = None

    @property
    def route(self) -> Optional[RouteOverlay]:
        return self._route

    def set_tile_style(self, style: TileStyle) -> None:
        self.tile_style = TileStyle(style)

    def set_markers(self, start: Optional[LatLng], end: Optional[LatLng]) -> None:
        self.start_marker = start
        self.end_marker = end

    def clear_route(self) -> None:
        if self._route is not None:
            logger.debug("Releasing route with %d points", len(self._route.points))
        self._route = None

    def set_route(self, overlay: RouteOverlay) -> None:
        self.clear_route()
        self._route = overlay
        self.fit_bounds(overlay.bounds)

    def fit_bounds(self, bounds: Bounds) -> None:
        self.viewport = bounds

    # --------- RENDER ---------

    def render(self) -> folium.Map:
        tile = TILE_LAYERS[self.tile_style.value]
        m = folium.Map(location=list(self.center), zoom_start=self.zoom, tiles=None)
        folium.TileLayer(
            tiles=tile["url"],
            attr=tile["attribution"],
            name=self.tile_style.value,
            subdomains=tile["subdomains"],
        ).add_to(m)

        if self.start_marker is not None:
            folium.Marker(
                list(self.start_marker.as_tuple()),
                popup="Start Location",
                icon=_marker_icon(START_ICON_HTML),
            ).add_to(m)
        if self.end_marker is not None:
            folium.Marker(
                list(self.end_marker.as_tuple()),
                popup="Destination",
                icon=_marker_icon(END_ICON_HTML),
            ).add_to(m)

        if self._route is not None:
            folium.PolyLine(
                [list(p.as_tuple()) for p in self._route.points],
                **ROUTE_STYLE,
            ).add_to(m)

        if self.viewport is not None:
            m.fit_bounds(self.viewport.as_leaflet())

        return m

    def to_html(self) -> str:
        return self.render().get_root().render()

    def save(self, path: str) -> None:
        self.render().save(path)
