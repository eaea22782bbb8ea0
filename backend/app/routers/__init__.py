"""Routers package."""

from .associations import router as associations_router
from .dashboard import router as dashboard_router
from .financial_records import router as financial_records_router
from .financial_reports import router as financial_reports_router
from .monitoring import router as monitoring_router
from .performance import router as performance_router
from .ratings import router as ratings_router

__all__ = [
    "associations_router",
    "dashboard_router",
    "financial_records_router",
    "financial_reports_router",
    "monitoring_router",
    "performance_router",
    "ratings_router",
]
