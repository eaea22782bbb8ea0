"""Pydantic schemas for financial reports and the group-report summary."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from .common import CamelDocumentRead, CamelModel, PaginatedResponse, reject_null


class FinancialReportInputs(CamelModel):
    """Raw inputs every derived report field is computed from."""

    sales: float = Field(default=0, ge=0, allow_inf_nan=False)
    costs: float = Field(default=0, ge=0, allow_inf_nan=False)
    expenses: float = Field(default=0, ge=0, allow_inf_nan=False)


class FinancialReportCreate(FinancialReportInputs):
    """Schema used when filing a report manually.

    Derived fields sent by the caller are ignored and recomputed.
    """

    id: Optional[str] = Field(default=None, max_length=64)
    association_id: str = Field(..., min_length=1, max_length=64)
    association_name: Optional[str] = Field(default=None, max_length=200)
    period: str = Field(..., min_length=1, max_length=100)
    report_date: Optional[datetime] = None
    caretaker_id: Optional[str] = Field(default=None, max_length=64)
    caretaker_name: Optional[str] = Field(default=None, max_length=200)


class FinancialReportUpdate(CamelModel):
    """Schema used when amending a report."""

    period: Optional[str] = Field(default=None, min_length=1, max_length=100)
    report_date: Optional[datetime] = None
    caretaker_id: Optional[str] = Field(default=None, max_length=64)
    caretaker_name: Optional[str] = Field(default=None, max_length=200)
    sales: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    costs: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    expenses: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("period", "report_date", "sales", "costs", "expenses")
    @classmethod
    def _reject_null(cls, value):
        return reject_null(value)


class FinancialReportGenerate(CamelModel):
    """Request to synthesise a report for an association."""

    association_id: str = Field(..., min_length=1, max_length=64)
    period: Optional[str] = Field(default=None, min_length=1, max_length=100)
    year: Optional[int] = Field(default=None, ge=1900, le=9999)


class FinancialReportRead(CamelDocumentRead):
    """Schema used when returning report data."""

    association_id: str
    association_name: str
    period: str
    report_date: datetime
    caretaker_id: Optional[str] = None
    caretaker_name: Optional[str] = None
    sales: float
    costs: float
    expenses: float
    profit: float
    share80: float
    ass_share20: float
    monitoring2: float
    balance: float
    archived: bool = False


class FinancialReportGenerated(FinancialReportRead):
    """Report returned by the generate endpoint, flagged when it already existed."""

    existing: bool = False


class FinancialReportListResponse(PaginatedResponse[FinancialReportRead]):
    """Paginated report listing."""


class PerformanceRating(CamelModel):
    """One-to-five performance rating of an association."""

    financial_health: float
    membership_engagement: float
    operational_efficiency: float
    compliance_score: float
    weighted_average: float
    plus_factor: float
    overall_rating: float
    descriptive_rating: str


class AssociationReportSummary(CamelModel):
    """Per-association line of the group-report summary."""

    association_id: str
    association_name: str
    location: Optional[str] = None
    status: str
    total_members: int
    active_members: int
    total_revenue: float
    total_expenses: float
    net_profit: float
    sustainability_score: Optional[float] = None
    compliance_rate: Optional[float] = None
    last_report_date: Optional[datetime] = None
    report_period: str
    performance_metrics: Optional[PerformanceRating] = None


class GroupReportSummary(CamelModel):
    """Yearly summary of reports across associations."""

    total_associations: int
    associations_with_reports: int
    total_reports: int
    total_sales: float
    total_profit: float
    total_balance: float
    total_ass_share: float
    report_year: int
    generated_at: datetime
    report_summaries: List[AssociationReportSummary]
    performance_metrics: Dict[str, PerformanceRating]
