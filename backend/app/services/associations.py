"""Business logic for member associations."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .. import models, schemas
from .aggregation import association_stats
from .repository import Repository


class AssociationService:
    """Encapsulates lifecycle operations for associations."""

    @staticmethod
    def _repository(db: Session) -> Repository[models.Association]:
        return Repository(db, models.Association)

    @staticmethod
    def list_associations(
        db: Session,
        *,
        status: Optional[models.AssociationStatus] = None,
        search: Optional[str] = None,
        include_archived: bool = False,
        skip: int = 0,
        limit: Optional[int] = 100,
    ) -> Tuple[Iterable[models.Association], int]:
        filters = []
        if search:
            normalized = f"%{search.strip().lower()}%"
            filters.append(
                or_(
                    func.lower(models.Association.name).like(normalized),
                    func.lower(models.Association.location).like(normalized),
                )
            )
        return AssociationService._repository(db).list(
            criteria={"status": status},
            filters=filters,
            order_by=(models.Association.name.asc(),),
            skip=skip,
            limit=limit,
            include_archived=include_archived,
        )

    @staticmethod
    def list_archived(
        db: Session, *, skip: int = 0, limit: int = 100
    ) -> Tuple[Iterable[models.Association], int]:
        return AssociationService._repository(db).list_archived(
            order_by=(models.Association.archived_at.desc(),), skip=skip, limit=limit
        )

    @staticmethod
    def get_association(db: Session, association_id: str) -> models.Association:
        return AssociationService._repository(db).require(association_id)

    @staticmethod
    def create_association(db: Session, data: schemas.AssociationCreate) -> models.Association:
        payload = data.model_dump(exclude_unset=True)
        payload["name"] = payload["name"].strip()
        return AssociationService._repository(db).create(payload)

    @staticmethod
    def update_association(
        db: Session, association_id: str, data: schemas.AssociationUpdate
    ) -> models.Association:
        payload = data.model_dump(exclude_unset=True)
        if payload.get("name"):
            payload["name"] = payload["name"].strip()
        return AssociationService._repository(db).update(association_id, payload)

    @staticmethod
    def archive_association(db: Session, association_id: str) -> models.Association:
        return AssociationService._repository(db).archive(association_id)

    @staticmethod
    def restore_association(db: Session, association_id: str) -> models.Association:
        return AssociationService._repository(db).restore(association_id)

    @staticmethod
    def stats(db: Session, *, now: Optional[datetime] = None) -> dict:
        associations = AssociationService._repository(db).find()
        return association_stats(associations, now=now)

    @staticmethod
    def name_lookup(db: Session) -> Dict[str, str]:
        """Map application identifiers to current association names, archived included."""

        rows = db.query(models.Association.id, models.Association.name).all()
        return {association_id: name for association_id, name in rows}
