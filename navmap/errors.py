# navmap/errors.py


class NavMapError(Exception):
    """
    Base de todos los errores del proxy y del workflow del mapa.
    `public_message` es lo único que se le muestra al cliente.
    """
    public_message = "Internal server error"
    status_code = 500


class ValidationError(NavMapError):
    """Entrada faltante o inválida. No se hace ninguna llamada externa."""
    public_message = "Address query parameter is required"
    status_code = 400


class NotFoundError(NavMapError):
    """El servicio externo respondió bien pero sin resultados."""
    public_message = "Location not found"
    status_code = 404


class UpstreamError(NavMapError):
    """Fallo de red, status inesperado o respuesta mal formada de un tercero."""


class DeviceError(NavMapError):
    """Permiso denegado o fallo del dispositivo al pedir la geolocalización."""
