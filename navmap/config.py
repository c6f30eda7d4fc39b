# navmap/config.py

import os

# --------- SERVIDOR ---------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --------- SERVICIOS EXTERNOS ---------

NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org")
# Nominatim exige un User-Agent que identifique a la aplicación
NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "NavigationMap/0.1 (route viewer)")

OSRM_URL = os.getenv("OSRM_URL", "https://router.project-osrm.org")
OSRM_PROFILE = "driving"

# Proxy que usa el workflow del mapa para geocodificar
PROXY_URL = os.getenv("PROXY_URL", f"http://localhost:{PORT}")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

# --------- MAPA ---------

MAP_CENTER = (20.5937, 78.9629)
MAP_ZOOM = 5

TILE_LAYERS = {
    "normal": {
        "url": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        "attribution": "&copy; OpenStreetMap contributors",
        "subdomains": "abc",
    },
    "satellite": {
        "url": "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png",
        "attribution": "&copy; OpenStreetMap France",
        "subdomains": "abc",
    },
    "hybrid": {
        "url": "https://{s}.google.com/vt/lyrs=s,h&x={x}&y={y}&z={z}",
        "attribution": "Google",
        "subdomains": ["mt0", "mt1", "mt2", "mt3"],
    },
}

ROUTE_STYLE = {"color": "blue", "weight": 5, "opacity": 0.7}

# Geolocalización del dispositivo: espera corta y sin posiciones cacheadas
GEOLOCATION_TIMEOUT_S = 10.0
GEOLOCATION_HIGH_ACCURACY = True
GEOLOCATION_MAXIMUM_AGE_S = 0.0
