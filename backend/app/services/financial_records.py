"""Business logic for project and association financial records."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from .. import models, schemas
from .aggregation import RecordFilter, summarize_records
from .repository import Repository


class FinancialRecordService:
    """Encapsulates CRUD and dashboard operations for financial records."""

    @staticmethod
    def _repository(db: Session) -> Repository[models.FinancialRecord]:
        return Repository(db, models.FinancialRecord)

    @staticmethod
    def list_records(
        db: Session,
        *,
        project_id: Optional[str] = None,
        association_id: Optional[str] = None,
        record_type: Optional[models.RecordType] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.FinancialRecord], int]:
        return FinancialRecordService._repository(db).list(
            criteria={
                "project_id": project_id,
                "association_id": association_id,
                "record_type": record_type,
            },
            order_by=(models.FinancialRecord.record_date.desc(), models.FinancialRecord.created_at.desc()),
            skip=skip,
            limit=limit,
        )

    @staticmethod
    def list_archived(
        db: Session, *, skip: int = 0, limit: int = 100
    ) -> Tuple[Iterable[models.FinancialRecord], int]:
        return FinancialRecordService._repository(db).list_archived(
            order_by=(models.FinancialRecord.archived_at.desc(),), skip=skip, limit=limit
        )

    @staticmethod
    def get_record(db: Session, record_id: str) -> models.FinancialRecord:
        return FinancialRecordService._repository(db).require(record_id)

    @staticmethod
    def create_record(db: Session, data: schemas.FinancialRecordCreate) -> models.FinancialRecord:
        return FinancialRecordService._repository(db).create(data.model_dump(exclude_unset=True))

    @staticmethod
    def update_record(
        db: Session, record_id: str, data: schemas.FinancialRecordUpdate
    ) -> models.FinancialRecord:
        return FinancialRecordService._repository(db).update(
            record_id, data.model_dump(exclude_unset=True)
        )

    @staticmethod
    def archive_record(db: Session, record_id: str) -> models.FinancialRecord:
        return FinancialRecordService._repository(db).archive(record_id)

    @staticmethod
    def restore_record(db: Session, record_id: str) -> models.FinancialRecord:
        return FinancialRecordService._repository(db).restore(record_id)

    @staticmethod
    def dashboard(db: Session, record_filter: RecordFilter) -> dict:
        """Summarise the non-archived records selected by ``record_filter``."""

        records, _ = FinancialRecordService._repository(db).list(
            criteria={
                "project_id": record_filter.project_id,
                "association_id": record_filter.association_id,
            }
        )
        return summarize_records(records, record_filter)
