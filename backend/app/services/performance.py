"""Business logic for livestock performance observations."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from .. import models, schemas
from .aggregation import compute_performance_metrics
from .repository import Repository


class PerformanceService:
    """Records weigh-ins and computes yearly herd metrics."""

    @staticmethod
    def create_record(db: Session, data: schemas.PigPerformanceCreate) -> models.PigPerformanceRecord:
        return Repository(db, models.PigPerformanceRecord).create(data.model_dump(exclude_unset=True))

    @staticmethod
    def metrics(
        db: Session,
        *,
        year: Optional[int] = None,
        association_id: Optional[str] = None,
        caretaker_id: Optional[str] = None,
    ) -> dict:
        year = year or date.today().year
        records, _ = Repository(db, models.PigPerformanceRecord).list(
            criteria={"association_id": association_id, "caretaker_id": caretaker_id},
            filters=(
                models.PigPerformanceRecord.date >= date(year, 1, 1),
                models.PigPerformanceRecord.date <= date(year, 12, 31),
            ),
        )
        return compute_performance_metrics(records, year)
