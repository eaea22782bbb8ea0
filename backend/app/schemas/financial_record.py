"""Pydantic schemas for financial records and their dashboard."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.financial_record import RecordType
from .common import DocumentRead, PaginatedResponse, reject_null


class FinancialRecordBase(BaseModel):
    """Attributes shared by create and read operations."""

    project_id: str = Field(..., min_length=1, max_length=64)
    association_id: Optional[str] = Field(default=None, max_length=64)
    record_date: date
    record_type: RecordType
    amount: float = Field(..., allow_inf_nan=False)
    description: Optional[str] = None
    note: Optional[str] = None


class FinancialRecordCreate(FinancialRecordBase):
    """Schema used when creating a financial record."""

    id: Optional[str] = Field(default=None, max_length=64)


class FinancialRecordUpdate(BaseModel):
    """Schema used when updating a financial record."""

    project_id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    association_id: Optional[str] = Field(default=None, max_length=64)
    record_date: Optional[date] = None
    record_type: Optional[RecordType] = None
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    description: Optional[str] = None
    note: Optional[str] = None

    @field_validator("project_id", "record_date", "record_type", "amount")
    @classmethod
    def _reject_null(cls, value):
        return reject_null(value)


class FinancialRecordRead(DocumentRead, FinancialRecordBase):
    """Schema used when returning financial record data."""

    archived: bool = False

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class FinancialRecordListResponse(PaginatedResponse[FinancialRecordRead]):
    """Paginated financial record listing."""


class RecordSummary(BaseModel):
    """Totals and extremes over the selected records."""

    total_income: Optional[float] = 0.0
    total_expense: Optional[float] = 0.0
    total_savings: Optional[float] = 0.0
    total_amount: Optional[float] = 0.0
    avg_amount: Optional[float] = 0.0
    min_amount: Optional[float] = 0.0
    max_amount: Optional[float] = 0.0


class RecordTypeTotal(BaseModel):
    """Summed amount of one record type."""

    record_type: str
    total: Optional[float] = 0.0


class FinancialDashboard(BaseModel):
    """Summary envelope returned by the financial records dashboard."""

    summary: RecordSummary
    distribution: List[RecordTypeTotal]
    record_count: int = Field(..., ge=0)
    non_finite_count: int = Field(default=0, ge=0)
