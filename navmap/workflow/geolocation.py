# navmap/workflow/geolocation.py

from abc import ABC, abstractmethod
from typing import Optional

from navmap.config import (
    GEOLOCATION_HIGH_ACCURACY,
    GEOLOCATION_MAXIMUM_AGE_S,
    GEOLOCATION_TIMEOUT_S,
)
from navmap.errors import DeviceError
from navmap.models import LatLng


class GeolocationProvider(ABC):
    """
    Interfaz para la posición del dispositivo. Cada plataforma (navegador,
    GPS, etc.) implementa su propio adaptador con los mismos parámetros.
    """

    @abstractmethod
    async def current_position(
        self,
        timeout: float = GEOLOCATION_TIMEOUT_S,
        high_accuracy: bool = GEOLOCATION_HIGH_ACCURACY,
        maximum_age: float = GEOLOCATION_MAXIMUM_AGE_S,
    ) -> LatLng:
        """Regresa la posición actual o lanza DeviceError."""


class StaticGeolocation(GeolocationProvider):
    """Posición fija (configurada a mano); sin posición se comporta como un permiso denegado."""

    def __init__(self, position: Optional[LatLng] = None):
        self.position = position
        self.last_request: Optional[dict] = None

    async def current_position(
        self,
        timeout: float = GEOLOCATION_TIMEOUT_S,
        high_accuracy: bool = GEOLOCATION_HIGH_ACCURACY,
        maximum_age: float = GEOLOCATION_MAXIMUM_AGE_S,
    ) -> LatLng:
        self.last_request = {
            "timeout": timeout,
            "high_accuracy": high_accuracy,
            "maximum_age": maximum_age,
        }
        if self.position is None:
            raise DeviceError("Geolocation unavailable or permission denied")
        return self.position
