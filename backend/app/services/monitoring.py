"""Business logic for monitoring visits."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from .. import models, schemas
from .repository import Repository


class MonitoringService:
    """Encapsulates lifecycle operations for monitoring records."""

    @staticmethod
    def _repository(db: Session) -> Repository[models.MonitoringRecord]:
        return Repository(db, models.MonitoringRecord)

    @staticmethod
    def list_records(
        db: Session,
        *,
        association_id: Optional[str] = None,
        project_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.MonitoringRecord], int]:
        return MonitoringService._repository(db).list(
            criteria={"association_id": association_id, "project_id": project_id},
            order_by=(models.MonitoringRecord.visit_date.desc(),),
            skip=skip,
            limit=limit,
        )

    @staticmethod
    def list_archived(
        db: Session, *, skip: int = 0, limit: int = 100
    ) -> Tuple[Iterable[models.MonitoringRecord], int]:
        return MonitoringService._repository(db).list_archived(
            order_by=(models.MonitoringRecord.archived_at.desc(),), skip=skip, limit=limit
        )

    @staticmethod
    def get_record(db: Session, record_id: str) -> models.MonitoringRecord:
        return MonitoringService._repository(db).require(record_id)

    @staticmethod
    def create_record(db: Session, data: schemas.MonitoringRecordCreate) -> models.MonitoringRecord:
        return MonitoringService._repository(db).create(data.model_dump(exclude_unset=True))

    @staticmethod
    def update_record(
        db: Session, record_id: str, data: schemas.MonitoringRecordUpdate
    ) -> models.MonitoringRecord:
        return MonitoringService._repository(db).update(record_id, data.model_dump(exclude_unset=True))

    @staticmethod
    def archive_record(db: Session, record_id: str) -> models.MonitoringRecord:
        return MonitoringService._repository(db).archive(record_id)

    @staticmethod
    def restore_record(db: Session, record_id: str) -> models.MonitoringRecord:
        return MonitoringService._repository(db).restore(record_id)
