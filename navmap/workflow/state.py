# navmap/workflow/state.py
#
# Estado del mapa como objeto inmutable + reducer de un solo hilo.
# Cada acción produce un WorkflowState nuevo; nadie muta el anterior.

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from navmap.models import LatLng

Endpoint = Literal["start", "end"]


class TileStyle(str, Enum):
    NORMAL = "normal"
    SATELLITE = "satellite"
    HYBRID = "hybrid"


class Phase(str, Enum):
    EMPTY = "empty"
    START_ONLY = "start_only"
    END_ONLY = "end_only"
    BOTH_RESOLVED = "both_resolved"


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    coords: Optional[LatLng] = None

    @property
    def resolved(self) -> bool:
        return self.coords is not None


class WorkflowState(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Location = Field(default_factory=Location)
    end: Location = Field(default_factory=Location)
    tile_style: TileStyle = TileStyle.NORMAL

    @property
    def phase(self) -> Phase:
        if self.start.resolved and self.end.resolved:
            return Phase.BOTH_RESOLVED
        if self.start.resolved:
            return Phase.START_ONLY
        if self.end.resolved:
            return Phase.END_ONLY
        return Phase.EMPTY

    def location(self, endpoint: Endpoint) -> Location:
        return self.start if endpoint == "start" else self.end


# --------- ACCIONES ---------

class EditName(BaseModel):
    endpoint: Endpoint
    name: str


class SetCoords(BaseModel):
    endpoint: Endpoint
    coords: LatLng


class SetLocation(BaseModel):
    """Nombre y coordenadas juntos (p. ej. ubicación actual del dispositivo)."""
    endpoint: Endpoint
    name: str
    coords: LatLng


class Swap(BaseModel):
    pass


class SelectTileStyle(BaseModel):
    style: TileStyle


Action = Union[EditName, SetCoords, SetLocation, Swap, SelectTileStyle]


def _replace(state: WorkflowState, endpoint: Endpoint, location: Location) -> WorkflowState:
    return state.model_copy(update={endpoint: location})


def reduce(state: WorkflowState, action: Action) -> WorkflowState:
    if isinstance(action, EditName):
        current = state.location(action.endpoint)
        return _replace(state, action.endpoint, current.model_copy(update={"name": action.name}))

    if isinstance(action, SetCoords):
        current = state.location(action.endpoint)
        return _replace(state, action.endpoint, current.model_copy(update={"coords": action.coords}))

    if isinstance(action, SetLocation):
        return _replace(state, action.endpoint, Location(name=action.name, coords=action.coords))

    if isinstance(action, Swap):
        # nombre y coords viajan juntos: el estado de resolución se conserva
        return state.model_copy(update={"start": state.end, "end": state.start})

    if isinstance(action, SelectTileStyle):
        return state.model_copy(update={"tile_style": action.style})

    raise TypeError(f"Unknown action: {type(action).__name__}")
