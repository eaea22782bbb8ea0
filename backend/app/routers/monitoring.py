"""API router for monitoring visits."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import MonitoringService
from .errors import SERVICE_ERRORS, to_http_error

router = APIRouter()


@router.get("", response_model=schemas.MonitoringRecordListResponse)
def list_monitoring_records(
    db: Session = Depends(get_db),
    association_id: Optional[str] = Query(None, description="Filter by association"),
    project_id: Optional[str] = Query(None, description="Filter by project"),
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(50, ge=1, le=200, description="Records to return"),
) -> schemas.MonitoringRecordListResponse:
    items, total = MonitoringService.list_records(
        db, association_id=association_id, project_id=project_id, skip=skip, limit=limit
    )
    return schemas.MonitoringRecordListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/archived", response_model=schemas.MonitoringRecordListResponse)
def list_archived_monitoring_records(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> schemas.MonitoringRecordListResponse:
    items, total = MonitoringService.list_archived(db, skip=skip, limit=limit)
    return schemas.MonitoringRecordListResponse(items=items, total=total, limit=limit, skip=skip)


@router.post("", response_model=schemas.MonitoringRecordRead, status_code=status.HTTP_201_CREATED)
def create_monitoring_record(
    payload: schemas.MonitoringRecordCreate, db: Session = Depends(get_db)
) -> schemas.MonitoringRecordRead:
    try:
        return MonitoringService.create_record(db, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.get("/{record_id}", response_model=schemas.MonitoringRecordRead)
def get_monitoring_record(record_id: str, db: Session = Depends(get_db)) -> schemas.MonitoringRecordRead:
    try:
        return MonitoringService.get_record(db, record_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.patch("/{record_id}", response_model=schemas.MonitoringRecordRead)
def update_monitoring_record(
    record_id: str,
    payload: schemas.MonitoringRecordUpdate,
    db: Session = Depends(get_db),
) -> schemas.MonitoringRecordRead:
    try:
        return MonitoringService.update_record(db, record_id, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.patch("/{record_id}/archive", response_model=schemas.MonitoringRecordRead)
def archive_monitoring_record(record_id: str, db: Session = Depends(get_db)) -> schemas.MonitoringRecordRead:
    try:
        return MonitoringService.archive_record(db, record_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.patch("/{record_id}/restore", response_model=schemas.MonitoringRecordRead)
def restore_monitoring_record(record_id: str, db: Session = Depends(get_db)) -> schemas.MonitoringRecordRead:
    try:
        return MonitoringService.restore_record(db, record_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
