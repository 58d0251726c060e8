from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from engine.api import ModelRegistry
from engine.contracts.errors import (
    IndexOutOfBoundsError,
    MatrixLoadError,
    UnknownMatrixError,
    UnknownModelError,
)

from .adapters.io.environment import get_cors_origins, get_log_level
from .exceptions import InvalidIndexError, UnknownSectorError
from .startup import register_startup

# Routers
from .routers.health import router as health_router
from .routers.matrices import router as matrices_router
from .routers.models import router as models_router

logging.basicConfig(level=get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


class _SkipHealthAccessLogs(logging.Filter):
    """Hide uvicorn access logs for liveness checks."""
    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return "/healthz" not in msg and "/api/ping" not in msg

# Attach the filter once
_access_logger = logging.getLogger("uvicorn.access")
# Avoid duplicate filters on reload
if not any(isinstance(f, _SkipHealthAccessLogs) for f in getattr(_access_logger, "filters", [])):
    _access_logger.addFilter(_SkipHealthAccessLogs())


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Map engine/backend errors to HTTP responses."""

    @app.exception_handler(UnknownModelError)
    async def _unknown_model(request: Request, exc: UnknownModelError):
        return _error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(UnknownMatrixError)
    async def _unknown_matrix(request: Request, exc: UnknownMatrixError):
        return _error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(UnknownSectorError)
    async def _unknown_sector(request: Request, exc: UnknownSectorError):
        return _error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(InvalidIndexError)
    async def _invalid_index(request: Request, exc: InvalidIndexError):
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(IndexOutOfBoundsError)
    async def _out_of_bounds(request: Request, exc: IndexOutOfBoundsError):
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(MatrixLoadError)
    async def _load_failed(request: Request, exc: MatrixLoadError):
        logger.error("%s %s -> load failed: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def create_app(registry: Optional[ModelRegistry] = None) -> FastAPI:
    app = FastAPI(
        title="USEEIO Matrix API",
        version="1.0.0",
        description="Serves matrices, DQI grids and metadata of input-output models",
    )
    app.state.registry = registry

    # CORS for dev + optional env override
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    extra = get_cors_origins()
    if extra:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=extra,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Robust request logging (won't crash on exceptions)
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        t0 = time.time()
        try:
            return await call_next(request)
        except Exception as e:
            dt = (time.time() - t0) * 1000
            logger.exception("%s %s -> ERR in %.1fms: %s: %s", request.method, request.url.path, dt, type(e).__name__, e)
            raise

    register_exception_handlers(app)
    register_startup(app)

    app.include_router(health_router,   prefix="/api", tags=["health"])
    app.include_router(models_router,   prefix="/api", tags=["models"])
    app.include_router(matrices_router, prefix="/api", tags=["matrices"])

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()
