"""API router for financial records and their dashboard."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models.financial_record import RecordType
from ..services import FinancialRecordService, RecordFilter
from .errors import SERVICE_ERRORS, to_http_error

router = APIRouter()


@router.get("", response_model=schemas.FinancialRecordListResponse)
def list_financial_records(
    db: Session = Depends(get_db),
    project_id: Optional[str] = Query(None, description="Filter by project"),
    association_id: Optional[str] = Query(None, description="Filter by association"),
    record_type: Optional[RecordType] = Query(None, description="Filter by record type"),
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(50, ge=1, le=200, description="Records to return"),
) -> schemas.FinancialRecordListResponse:
    items, total = FinancialRecordService.list_records(
        db,
        project_id=project_id,
        association_id=association_id,
        record_type=record_type,
        skip=skip,
        limit=limit,
    )
    return schemas.FinancialRecordListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/archived", response_model=schemas.FinancialRecordListResponse)
def list_archived_financial_records(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> schemas.FinancialRecordListResponse:
    items, total = FinancialRecordService.list_archived(db, skip=skip, limit=limit)
    return schemas.FinancialRecordListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/dashboard", response_model=schemas.FinancialDashboard)
def financial_dashboard(
    db: Session = Depends(get_db),
    project_id: Optional[str] = Query(None, description="Restrict to one project"),
    association_id: Optional[str] = Query(None, description="Restrict to one association"),
    date_from: Optional[date] = Query(None, description="Inclusive lower date bound"),
    date_to: Optional[date] = Query(None, description="Inclusive upper date bound"),
) -> schemas.FinancialDashboard:
    if date_from and date_to and date_from > date_to:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date_from must not be after date_to",
        )
    record_filter = RecordFilter(
        project_id=project_id,
        association_id=association_id,
        date_from=date_from,
        date_to=date_to,
    )
    return schemas.FinancialDashboard(**FinancialRecordService.dashboard(db, record_filter))


@router.post("", response_model=schemas.FinancialRecordRead, status_code=status.HTTP_201_CREATED)
def create_financial_record(
    payload: schemas.FinancialRecordCreate, db: Session = Depends(get_db)
) -> schemas.FinancialRecordRead:
    try:
        return FinancialRecordService.create_record(db, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.get("/{record_id}", response_model=schemas.FinancialRecordRead)
def get_financial_record(record_id: str, db: Session = Depends(get_db)) -> schemas.FinancialRecordRead:
    try:
        return FinancialRecordService.get_record(db, record_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.put("/{record_id}", response_model=schemas.FinancialRecordRead)
def update_financial_record(
    record_id: str,
    payload: schemas.FinancialRecordUpdate,
    db: Session = Depends(get_db),
) -> schemas.FinancialRecordRead:
    try:
        return FinancialRecordService.update_record(db, record_id, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.post("/{record_id}/archive", response_model=schemas.FinancialRecordRead)
def archive_financial_record(record_id: str, db: Session = Depends(get_db)) -> schemas.FinancialRecordRead:
    try:
        return FinancialRecordService.archive_record(db, record_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.post("/{record_id}/restore", response_model=schemas.FinancialRecordRead)
def restore_financial_record(record_id: str, db: Session = Depends(get_db)) -> schemas.FinancialRecordRead:
    try:
        return FinancialRecordService.restore_record(db, record_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
