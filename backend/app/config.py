"""Environment-driven settings shared by the backend modules."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "LOG_LEVEL"
RUN_DB_MIGRATIONS_ENV = "RUN_DB_MIGRATIONS"
REVENUE_PER_MEMBER_ENV = "REPORT_REVENUE_PER_MEMBER"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REVENUE_PER_MEMBER = 5000.0


def read_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


def read_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


def read_bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def revenue_per_member() -> float:
    """Base revenue per member used when synthesising generated reports."""

    return read_float_env(REVENUE_PER_MEMBER_ENV, DEFAULT_REVENUE_PER_MEMBER)


def configure_logging() -> None:
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
