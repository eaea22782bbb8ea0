"""API router for association financial reports."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import FinancialReportService
from .errors import SERVICE_ERRORS, to_http_error

router = APIRouter()


@router.get("", response_model=schemas.FinancialReportListResponse)
def list_financial_reports(
    db: Session = Depends(get_db),
    association_id: Optional[str] = Query(None, alias="associationId", description="Filter by association"),
    period: Optional[str] = Query(None, description="Filter by exact period label"),
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Filter by report year"),
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(50, ge=1, le=200, description="Records to return"),
) -> schemas.FinancialReportListResponse:
    items, total = FinancialReportService.list_reports(
        db,
        association_id=association_id,
        period=period,
        year=year,
        skip=skip,
        limit=limit,
    )
    return schemas.FinancialReportListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/summary", response_model=schemas.GroupReportSummary)
def group_report_summary(
    db: Session = Depends(get_db),
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Report year, defaults to the current one"),
) -> schemas.GroupReportSummary:
    return schemas.GroupReportSummary(**FinancialReportService.summary(db, year))


@router.post("", response_model=schemas.FinancialReportRead, status_code=status.HTTP_201_CREATED)
def create_financial_report(
    payload: schemas.FinancialReportCreate, db: Session = Depends(get_db)
) -> schemas.FinancialReportRead:
    try:
        return FinancialReportService.create_report(db, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.post(
    "/generate",
    response_model=schemas.FinancialReportGenerated,
    status_code=status.HTTP_201_CREATED,
)
def generate_financial_report(
    payload: schemas.FinancialReportGenerate,
    response: Response,
    db: Session = Depends(get_db),
) -> schemas.FinancialReportGenerated:
    try:
        report, created = FinancialReportService.get_or_create_report(
            db, payload.association_id, period=payload.period, year=payload.year
        )
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
    if not created:
        response.status_code = status.HTTP_200_OK
    result = schemas.FinancialReportGenerated.model_validate(report)
    return result.model_copy(update={"existing": not created})


@router.get("/{report_id}", response_model=schemas.FinancialReportRead)
def get_financial_report(report_id: str, db: Session = Depends(get_db)) -> schemas.FinancialReportRead:
    try:
        return FinancialReportService.get_report(db, report_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.put("/{report_id}", response_model=schemas.FinancialReportRead)
def update_financial_report(
    report_id: str,
    payload: schemas.FinancialReportUpdate,
    db: Session = Depends(get_db),
) -> schemas.FinancialReportRead:
    try:
        return FinancialReportService.update_report(db, report_id, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.delete("/{report_id}", response_model=schemas.FinancialReportRead)
def archive_financial_report(report_id: str, db: Session = Depends(get_db)) -> schemas.FinancialReportRead:
    """Archive the report; reports are never removed from storage."""
    try:
        return FinancialReportService.archive_report(db, report_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.post("/{report_id}/restore", response_model=schemas.FinancialReportRead)
def restore_financial_report(report_id: str, db: Session = Depends(get_db)) -> schemas.FinancialReportRead:
    try:
        return FinancialReportService.restore_report(db, report_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
