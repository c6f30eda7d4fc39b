# navmap/main.py
import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from navmap.api.routes_basic import router as basic_router
from navmap.api.routes_geocode import router as geocode_router
from navmap.config import LOG_LEVEL
from navmap.errors import NavMapError, UpstreamError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


app = FastAPI(
    title="Navigation Map Geocode Proxy",
    version="0.1.0",
)

# CORS totalmente abierto
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],      # <- cualquier dominio
    allow_credentials=False,  # con "*" no se mandan cookies
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(basic_router)
app.include_router(geocode_router)


@app.exception_handler(NavMapError)
async def navmap_error_handler(request: Request, exc: NavMapError):
    """
    Traduce la taxonomía de errores a status + {"error": ...}.
    El detalle interno solo va al log, nunca al cliente.
    """
    if isinstance(exc, UpstreamError) or exc.status_code >= 500:
        logger.error("Upstream failure on %s %s: %s", request.method, request.url, exc)
    else:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url, exc)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.public_message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url, exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )
