"""API router for member associations."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models.association import AssociationStatus
from ..services import AssociationService
from .errors import SERVICE_ERRORS, to_http_error

router = APIRouter()


@router.get("", response_model=schemas.AssociationListResponse)
def list_associations(
    db: Session = Depends(get_db),
    status_filter: Optional[AssociationStatus] = Query(None, alias="status", description="Filter by status"),
    search: Optional[str] = Query(None, description="Filter by name or location"),
    include_archived: bool = Query(False, description="Include archived associations"),
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(50, ge=1, le=200, description="Records to return"),
) -> schemas.AssociationListResponse:
    items, total = AssociationService.list_associations(
        db,
        status=status_filter,
        search=search,
        include_archived=include_archived,
        skip=skip,
        limit=limit,
    )
    return schemas.AssociationListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/archived", response_model=schemas.AssociationListResponse)
def list_archived_associations(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> schemas.AssociationListResponse:
    items, total = AssociationService.list_archived(db, skip=skip, limit=limit)
    return schemas.AssociationListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/stats", response_model=schemas.AssociationStats)
def association_stats(db: Session = Depends(get_db)) -> schemas.AssociationStats:
    return schemas.AssociationStats(**AssociationService.stats(db))


@router.post("", response_model=schemas.AssociationRead, status_code=status.HTTP_201_CREATED)
def create_association(
    payload: schemas.AssociationCreate, db: Session = Depends(get_db)
) -> schemas.AssociationRead:
    try:
        return AssociationService.create_association(db, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.get("/{association_id}", response_model=schemas.AssociationRead)
def get_association(association_id: str, db: Session = Depends(get_db)) -> schemas.AssociationRead:
    try:
        return AssociationService.get_association(db, association_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.patch("/{association_id}", response_model=schemas.AssociationRead)
def update_association(
    association_id: str,
    payload: schemas.AssociationUpdate,
    db: Session = Depends(get_db),
) -> schemas.AssociationRead:
    try:
        return AssociationService.update_association(db, association_id, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.patch("/{association_id}/archive", response_model=schemas.AssociationRead)
def archive_association(association_id: str, db: Session = Depends(get_db)) -> schemas.AssociationRead:
    try:
        return AssociationService.archive_association(db, association_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc


@router.patch("/{association_id}/restore", response_model=schemas.AssociationRead)
def restore_association(association_id: str, db: Session = Depends(get_db)) -> schemas.AssociationRead:
    try:
        return AssociationService.restore_association(db, association_id)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
