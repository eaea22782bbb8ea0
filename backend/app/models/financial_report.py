"""SQLAlchemy model for period financial reports of an association."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Float, Index, String

from ..database import Base
from .base import ArchivableMixin, DocumentMixin, utcnow


class FinancialReport(ArchivableMixin, DocumentMixin, Base):
    """Sales, costs and the derived profit split for one association period.

    ``association_name`` is a snapshot taken at creation time and is not kept
    in sync with later renames of the association.
    """

    __tablename__ = "financial_reports"

    association_id = Column(String(64), nullable=False)
    association_name = Column(String(200), nullable=False)
    period = Column(String(100), nullable=False)
    report_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    caretaker_id = Column(String(64), nullable=True)
    caretaker_name = Column(String(200), nullable=True)

    sales = Column(Float, nullable=False, default=0)
    costs = Column(Float, nullable=False, default=0)
    expenses = Column(Float, nullable=False, default=0)
    profit = Column(Float, nullable=False, default=0)
    share80 = Column(Float, nullable=False, default=0)
    ass_share20 = Column(Float, nullable=False, default=0)
    monitoring2 = Column(Float, nullable=False, default=0)
    balance = Column(Float, nullable=False, default=0)


Index(
    "financial_reports_association_period_idx",
    FinancialReport.association_id,
    FinancialReport.period,
)
Index("financial_reports_report_date_idx", FinancialReport.report_date)
