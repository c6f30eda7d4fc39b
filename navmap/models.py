# navmap/models.py
from typing import List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LatLng(BaseModel):
    """
    Par de coordenadas validado: numérico, finito y dentro de rango.
    Se usa tanto para lo que regresa el geocodificador como para el estado del mapa.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)


# --------- GEOCODE (proxy) ---------

class GeocodeResponse(BaseModel):
    lat: float
    lng: float


class ErrorResponse(BaseModel):
    error: str


# --------- RUTA ---------

class Bounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_points(cls, points: Sequence[LatLng]) -> "Bounds":
        if not points:
            raise ValueError("Cannot compute bounds of an empty point list")
        lats = [p.lat for p in points]
        lngs = [p.lng for p in points]
        return cls(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))

    def as_leaflet(self) -> List[List[float]]:
        # [[sur, oeste], [norte, este]] como lo espera Leaflet.fitBounds
        return [[self.south, self.west], [self.north, self.east]]


class RouteOverlay(BaseModel):
    model_config = ConfigDict(frozen=True)

    points: Tuple[LatLng, ...]
    bounds: Bounds

    @classmethod
    def from_points(cls, points: Sequence[LatLng]) -> "RouteOverlay":
        pts = tuple(points)
        return cls(points=pts, bounds=Bounds.from_points(pts))
