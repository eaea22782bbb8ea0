"""Composition of the dashboard statistics payload."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from .. import models
from .aggregation import summarize_reports
from .associations import AssociationService
from .ratings import RatingService
from .repository import Repository


class DashboardService:
    """Builds the financial summary, recent ratings and quarterly trends."""

    @staticmethod
    def stats(db: Session, *, now: Optional[datetime] = None) -> dict:
        reports = Repository(db, models.FinancialReport).find()
        summary = summarize_reports(
            reports, now=now, association_names=AssociationService.name_lookup(db)
        )
        trends = summary.pop("performance_trends")
        return {
            "financial_summary": summary,
            "recent_ratings": RatingService.list_recent(db),
            "performance_trends": trends,
        }
