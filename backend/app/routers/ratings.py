"""API router for association rating snapshots."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import RatingService
from .errors import SERVICE_ERRORS, to_http_error

router = APIRouter()


@router.get("", response_model=schemas.AssociationRatingList)
def list_recent_ratings(
    db: Session = Depends(get_db),
    limit: int = Query(5, ge=1, le=100, description="Number of ratings to return"),
) -> schemas.AssociationRatingList:
    return schemas.AssociationRatingList(items=RatingService.list_recent(db, limit=limit))


@router.post("", response_model=schemas.AssociationRatingRead, status_code=status.HTTP_201_CREATED)
def create_rating(
    payload: schemas.AssociationRatingCreate, db: Session = Depends(get_db)
) -> schemas.AssociationRatingRead:
    try:
        return RatingService.create_rating(db, payload)
    except SERVICE_ERRORS as exc:
        raise to_http_error(exc) from exc
