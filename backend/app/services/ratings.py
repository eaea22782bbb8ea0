"""Business logic for association rating snapshots."""

from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from .. import models, schemas
from .repository import Repository

RECENT_RATINGS_LIMIT = 5


class RatingService:
    """Stores and lists association rating snapshots."""

    @staticmethod
    def list_recent(db: Session, *, limit: int = RECENT_RATINGS_LIMIT) -> List[models.AssociationRating]:
        items, _ = Repository(db, models.AssociationRating).list(
            order_by=(models.AssociationRating.created_at.desc(),), limit=limit
        )
        return items

    @staticmethod
    def create_rating(db: Session, data: schemas.AssociationRatingCreate) -> models.AssociationRating:
        return Repository(db, models.AssociationRating).create(data.model_dump(exclude_unset=True))
