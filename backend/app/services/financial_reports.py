"""Business logic for association financial reports."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from .. import models, schemas
from .aggregation import summarize_group_reports
from .associations import AssociationService
from .financial_derivation import DERIVED_FIELDS, derive_report
from .report_generator import RandomSource, default_period_label, derive_generated_report
from .repository import Repository

LOGGER = logging.getLogger(__name__)

REPORT_INPUT_FIELDS = ("sales", "costs", "expenses")


class ReportServiceError(RuntimeError):
    """Raised when a report cannot be created or modified."""


def _year_bounds(year: int) -> Tuple[datetime, datetime]:
    return (
        datetime(year, 1, 1, tzinfo=timezone.utc),
        datetime(year + 1, 1, 1, tzinfo=timezone.utc),
    )


class FinancialReportService:
    """Encapsulates creation, derivation and lifecycle of financial reports."""

    @staticmethod
    def _repository(db: Session) -> Repository[models.FinancialReport]:
        return Repository(db, models.FinancialReport)

    @staticmethod
    def list_reports(
        db: Session,
        *,
        association_id: Optional[str] = None,
        period: Optional[str] = None,
        year: Optional[int] = None,
        skip: int = 0,
        limit: Optional[int] = 100,
    ) -> Tuple[Iterable[models.FinancialReport], int]:
        filters = []
        if year is not None:
            start, end = _year_bounds(year)
            filters.extend(
                [
                    models.FinancialReport.report_date >= start,
                    models.FinancialReport.report_date < end,
                ]
            )
        return FinancialReportService._repository(db).list(
            criteria={"association_id": association_id, "period": period},
            filters=filters,
            order_by=(models.FinancialReport.report_date.desc(),),
            skip=skip,
            limit=limit,
        )

    @staticmethod
    def get_report(db: Session, report_id: str) -> models.FinancialReport:
        return FinancialReportService._repository(db).require(report_id)

    @staticmethod
    def create_report(db: Session, data: schemas.FinancialReportCreate) -> models.FinancialReport:
        """Store a report from caller-supplied inputs, deriving every computed field.

        The association may be addressed by either identifier; the report is
        always filed under its application id. No uniqueness is enforced:
        several reports may share an association and period label.
        """

        payload = data.model_dump(exclude_unset=True)
        association = AssociationService.get_association(db, payload["association_id"])
        payload["association_id"] = association.id
        if not payload.get("association_name"):
            payload["association_name"] = association.name
        payload.update(
            derive_report(
                payload.get("sales"), payload.get("costs"), payload.get("expenses")
            ).as_dict()
        )
        report = FinancialReportService._repository(db).create(payload)
        LOGGER.info(
            "Created financial report",
            extra={"report_id": report.id, "association_id": report.association_id},
        )
        return report

    @staticmethod
    def get_or_create_report(
        db: Session,
        association_id: str,
        *,
        period: Optional[str] = None,
        year: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> Tuple[models.FinancialReport, bool]:
        """Return the report for ``(association, period)``, synthesising it if absent.

        The boolean is ``True`` when a new report was stored. Repeated calls
        for the same association and period return the first report.
        """

        association = AssociationService.get_association(db, association_id)
        if association.archived:
            raise ReportServiceError("Cannot generate a report for an archived association")
        label = default_period_label(period, year)
        repository = FinancialReportService._repository(db)

        existing = repository.find_one(association_id=association.id, period=label)
        if existing is not None:
            return existing, False

        derived = derive_generated_report(association, label, rng=rng)
        payload = {
            "association_id": association.id,
            "association_name": association.name,
            "period": label,
            **derived.as_dict(),
        }
        report = repository.create(payload)
        LOGGER.info(
            "Generated financial report",
            extra={"report_id": report.id, "association_id": association.id, "period": label},
        )
        return report, True

    @staticmethod
    def update_report(
        db: Session, report_id: str, data: schemas.FinancialReportUpdate
    ) -> models.FinancialReport:
        """Apply ``data`` and re-derive computed fields when any input changed."""

        repository = FinancialReportService._repository(db)
        payload = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if key not in DERIVED_FIELDS
        }
        if any(field in payload for field in REPORT_INPUT_FIELDS):
            current = repository.require(report_id)
            derived = derive_report(
                payload.get("sales", current.sales),
                payload.get("costs", current.costs),
                payload.get("expenses", current.expenses),
            )
            payload.update(derived.as_dict())
        return repository.update(report_id, payload)

    @staticmethod
    def archive_report(db: Session, report_id: str) -> models.FinancialReport:
        return FinancialReportService._repository(db).archive(report_id)

    @staticmethod
    def restore_report(db: Session, report_id: str) -> models.FinancialReport:
        return FinancialReportService._repository(db).restore(report_id)

    @staticmethod
    def summary(db: Session, year: Optional[int] = None, *, now: Optional[datetime] = None) -> dict:
        """Yearly group-report summary across every non-archived association."""

        now = now or datetime.now(timezone.utc)
        report_year = year or now.year
        associations, _ = AssociationService.list_associations(db, limit=None)
        reports, _ = FinancialReportService.list_reports(db, year=report_year, limit=None)
        return summarize_group_reports(list(associations), list(reports), year=report_year, now=now)
