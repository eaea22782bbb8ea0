"""API router for dashboard statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import DashboardService

router = APIRouter()


@router.get("/stats", response_model=schemas.DashboardStats)
def dashboard_stats(db: Session = Depends(get_db)) -> schemas.DashboardStats:
    """Return the financial summary, the latest ratings and quarterly trends."""
    return schemas.DashboardStats(**DashboardService.stats(db))
