"""Pydantic schemas for the dashboard statistics payload."""

from __future__ import annotations

from typing import List

from .common import CamelModel
from .financial_report import FinancialReportRead
from .rating import AssociationRatingRead


class TopPerformer(CamelModel):
    """Association ranked by summed report profit."""

    association_id: str
    name: str
    profit: float
    balance: float


class FinancialSummary(CamelModel):
    """Totals across all non-archived reports."""

    total_sales: float
    total_profit: float
    total_balance: float
    total_associations: int
    total_reports: int
    average_profit_margin: float
    top_performing_associations: List[TopPerformer]
    recent_reports: List[FinancialReportRead]


class TrendPoint(CamelModel):
    """Report totals for one calendar quarter."""

    period: str
    sales: float
    profit: float
    balance: float


class DashboardStats(CamelModel):
    """Envelope returned by ``/dashboard/stats``."""

    financial_summary: FinancialSummary
    recent_ratings: List[AssociationRatingRead]
    performance_trends: List[TrendPoint]
