"""Database configuration for the livelihood program backend."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import read_bool_env, read_int_env

_DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "livelihood.db"
_DEFAULT_DATABASE_URL = f"sqlite:///{_DEFAULT_DB_PATH.as_posix()}"
REQUIRE_POSTGRES_ENV = "REQUIRE_POSTGRES"
POOL_SIZE_ENV = "DATABASE_POOL_SIZE"
POOL_MAX_OVERFLOW_ENV = "DATABASE_MAX_OVERFLOW"
POOL_TIMEOUT_ENV = "DATABASE_POOL_TIMEOUT"
POOL_RECYCLE_ENV = "DATABASE_POOL_RECYCLE"
CONNECT_TIMEOUT_ENV = "DATABASE_CONNECT_TIMEOUT"

DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 10
DEFAULT_POOL_TIMEOUT = 30
DEFAULT_POOL_RECYCLE = 1800
DEFAULT_CONNECT_TIMEOUT = 10


def _ensure_directory(path: str | os.PathLike[str]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _resolve_database_url(raw_url: str | None) -> str:
    require_postgres = read_bool_env(REQUIRE_POSTGRES_ENV, False)
    if not raw_url:
        if require_postgres:
            raise RuntimeError(
                "DATABASE_URL must be configured for PostgreSQL when REQUIRE_POSTGRES=1"
            )
        _ensure_directory(_DEFAULT_DB_PATH)
        return _DEFAULT_DATABASE_URL

    url = make_url(raw_url)
    is_sqlite = url.drivername.startswith("sqlite")
    if is_sqlite and url.database not in (None, "", ":memory:"):
        _ensure_directory(url.database)
    if require_postgres and is_sqlite:
        raise RuntimeError(
            "SQLite is not permitted when REQUIRE_POSTGRES=1; configure DATABASE_URL"
        )
    return url.render_as_string(hide_password=False)


def _engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": read_int_env(POOL_SIZE_ENV, DEFAULT_POOL_SIZE),
        "max_overflow": read_int_env(POOL_MAX_OVERFLOW_ENV, DEFAULT_MAX_OVERFLOW),
        "pool_timeout": read_int_env(POOL_TIMEOUT_ENV, DEFAULT_POOL_TIMEOUT),
        "pool_recycle": read_int_env(POOL_RECYCLE_ENV, DEFAULT_POOL_RECYCLE),
        "connect_args": {
            "connect_timeout": read_int_env(CONNECT_TIMEOUT_ENV, DEFAULT_CONNECT_TIMEOUT)
        },
    }


SQLALCHEMY_DATABASE_URL = _resolve_database_url(os.getenv("DATABASE_URL"))

engine = create_engine(SQLALCHEMY_DATABASE_URL, **_engine_options(SQLALCHEMY_DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Generator:
    """Yield a database session and ensure it is closed afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
