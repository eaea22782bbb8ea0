"""API router for livestock performance."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import PerformanceService
from .errors import SERVICE_ERRORS, to_http_error

router = APIRouter()


@router.get("/metrics", response_model=schemas.PerformanceMetrics)
def performance_metrics(
    db: Session = Depends(get_db),
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Year, defaults to the current one"),
    association_id: Optional[str] = Query(None, alias="associationId"),
    caretaker_id: Optional[str] = Query(None, alias="caretakerId"),
) -> schemas.PerformanceMetrics:
    metrics = PerformanceService.metrics(
        db, year=year, association_id=association_id, caretaker_id=caretaker_id
    )
    return schemas.PerformanceMetrics(**metrics)


@router.post("/records", response_model=schemas.PigPerformanceRead, status_code=status.HTTP_201_CREATED)
def create_performance_record(
    payload: schemas.PigPerformanceCreate, db: Session = Depends(get_db)
) -> schemas.PigPerformanceRead:
    try:
        return PerformanceService.create_record(db, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
