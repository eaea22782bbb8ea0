"""Expose the livelihood program FastAPI app and enforce local development CORS defaults."""

import logging
import os
import re
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import RUN_DB_MIGRATIONS_ENV, configure_logging, read_bool_env
from .migrations import run_database_migrations
from .routers import (
    associations_router,
    dashboard_router,
    financial_records_router,
    financial_reports_router,
    monitoring_router,
    performance_router,
    ratings_router,
)

LOGGER = logging.getLogger(__name__)

LOCAL_DEVELOPMENT_ORIGIN = "http://localhost:5173"
LOCAL_DEVELOPMENT_ORIGINS = {
    LOCAL_DEVELOPMENT_ORIGIN,
    "http://localhost:3000",
}
LOCALHOST_ORIGIN_REGEX = r"https?://(localhost|127\.0\.0\.1|0\.0\.0\.0)(:\d+)?$"

DEFAULT_ALLOWED_ORIGINS = {
    *LOCAL_DEVELOPMENT_ORIGINS,
    "http://127.0.0.1:5173",
    "http://0.0.0.0:5173",
    "http://127.0.0.1:3000",
    "http://localhost:4173",
    "http://127.0.0.1:4173",
}


def _normalize_origin(origin: str) -> str | None:
    stripped = origin.strip()
    if not stripped:
        return None
    return stripped.rstrip("/")


def _read_allowed_origins(raw_origins: Iterable[str]) -> list[str]:
    normalized = {_normalize_origin(origin) for origin in raw_origins}
    return sorted({origin for origin in normalized if origin})


def _split_raw_origins(raw_value: str) -> list[str]:
    """Split a raw origin string using commas or whitespace as separators."""

    return [origin for origin in re.split(r"[\s,]+", raw_value) if origin]


def _load_allowed_origins_from_env() -> list[str]:
    raw_value = os.getenv("BACKEND_ALLOWED_ORIGINS")
    if not raw_value:
        return []
    return _read_allowed_origins(_split_raw_origins(raw_value))


def _resolve_allowed_origins() -> list[str]:
    env_origins = _load_allowed_origins_from_env()
    if env_origins:
        origins = list(env_origins)
    else:
        origins = _read_allowed_origins(DEFAULT_ALLOWED_ORIGINS)

    missing_dev_origins = [
        origin for origin in LOCAL_DEVELOPMENT_ORIGINS if origin not in origins
    ]
    if missing_dev_origins:
        # The local dashboard dev servers are always allowed.
        origins = _read_allowed_origins([*origins, *missing_dev_origins])

    return origins


def ensure_database_is_ready() -> None:
    """Apply pending database migrations when the service starts."""

    if not read_bool_env(RUN_DB_MIGRATIONS_ENV, True):
        LOGGER.info("Database migrations disabled via %s", RUN_DB_MIGRATIONS_ENV)
        return
    LOGGER.info("Ensuring database schema is up to date before serving requests")
    run_database_migrations()


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    ensure_database_is_ready()
    yield


app = FastAPI(title="Livelihood Program API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_resolve_allowed_origins(),
    allow_origin_regex=LOCALHOST_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    LOGGER.exception(
        "Database error while handling request",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception(
        "Unhandled error while handling request",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(associations_router, prefix="/associations", tags=["associations"])
app.include_router(
    financial_records_router,
    prefix="/financial-records",
    tags=["financial-records"],
)
app.include_router(
    financial_reports_router,
    prefix="/financial-reports",
    tags=["financial-reports"],
)
app.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
app.include_router(ratings_router, prefix="/ratings", tags=["ratings"])
app.include_router(monitoring_router, prefix="/monitoring", tags=["monitoring"])
app.include_router(performance_router, prefix="/performance", tags=["performance"])


@app.get("/", tags=["health"])
def read_root() -> dict[str, str]:
    """Return a simple health check response."""
    return {"status": "ok"}
