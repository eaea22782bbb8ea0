"""Utility helpers to ensure the database schema is up to date."""

from __future__ import annotations

import errno
import logging
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from alembic import command
from alembic.config import Config

from .config import read_float_env
from .database import SQLALCHEMY_DATABASE_URL

LOGGER = logging.getLogger(__name__)

LOCK_FILENAME = ".alembic-migration.lock"
LOCK_RETRY_DELAY = 0.25
LOCK_TIMEOUT_ENV = "ALEMBIC_MIGRATION_LOCK_TIMEOUT"
DEFAULT_LOCK_TIMEOUT = 30.0

if os.name == "posix":  # pragma: no cover - platform specific
    import fcntl
else:  # pragma: no cover - platform specific
    import msvcrt


def _read_lock_timeout() -> float:
    try:
        value = read_float_env(LOCK_TIMEOUT_ENV, DEFAULT_LOCK_TIMEOUT)
    except ValueError:
        LOGGER.warning(
            "Invalid %s; falling back to %.1f seconds", LOCK_TIMEOUT_ENV, DEFAULT_LOCK_TIMEOUT
        )
        return DEFAULT_LOCK_TIMEOUT
    if value <= 0:
        LOGGER.warning(
            "%s must be positive; using %.1f seconds", LOCK_TIMEOUT_ENV, DEFAULT_LOCK_TIMEOUT
        )
        return DEFAULT_LOCK_TIMEOUT
    return value


def _is_lock_conflict(error: OSError) -> bool:
    errno_value = getattr(error, "errno", None)
    if errno_value in {errno.EACCES, errno.EAGAIN, errno.EBUSY}:
        return True
    # ERROR_SHARING_VIOLATION (32) and ERROR_LOCK_VIOLATION (33) on Windows.
    return getattr(error, "winerror", None) in {32, 33}


def _acquire_lock(fileobj, *, timeout: float) -> None:
    deadline = time.monotonic() + timeout
    while True:
        try:
            if os.name == "posix":  # pragma: no cover - platform specific
                fcntl.flock(fileobj.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            else:  # pragma: no cover - platform specific
                msvcrt.locking(fileobj.fileno(), msvcrt.LK_NBLCK, 1)
            return
        except OSError as error:
            if not isinstance(error, BlockingIOError) and not _is_lock_conflict(error):
                raise
            if time.monotonic() >= deadline:
                raise TimeoutError("Timed out waiting for Alembic migration lock") from error
            time.sleep(LOCK_RETRY_DELAY)


def _release_lock(fileobj) -> None:
    if os.name == "posix":  # pragma: no cover - platform specific
        fcntl.flock(fileobj.fileno(), fcntl.LOCK_UN)
    else:  # pragma: no cover - platform specific
        msvcrt.locking(fileobj.fileno(), msvcrt.LK_UNLCK, 1)


@contextmanager
def _migration_lock(path: Path, *, timeout: float) -> Iterator[None]:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a+") as handle:
        LOGGER.debug("Acquiring Alembic migration lock at %s", path)
        _acquire_lock(handle, timeout=timeout)
        try:
            yield
        finally:
            _release_lock(handle)
            LOGGER.debug("Released Alembic migration lock at %s", path)


def build_alembic_config(database_url: str | None = None) -> Config:
    base_dir = Path(__file__).resolve().parent.parent
    config = Config(str(base_dir / "alembic.ini"))
    config.set_main_option("script_location", str(base_dir / "alembic"))
    config.set_main_option("sqlalchemy.url", database_url or SQLALCHEMY_DATABASE_URL)
    config.attributes["configure_logger"] = False
    return config


def run_database_migrations(database_url: str | None = None) -> None:
    """Upgrade the database to the latest Alembic revision under a file lock."""

    config = build_alembic_config(database_url)
    LOGGER.info("Running database migrations")
    lock_path = Path(__file__).resolve().parent.parent / LOCK_FILENAME
    with _migration_lock(lock_path, timeout=_read_lock_timeout()):
        command.upgrade(config, "head")
