"""Pydantic schemas for monitoring visits."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import DocumentRead, PaginatedResponse, reject_null


class MonitoringRecordBase(BaseModel):
    """Attributes shared by create and read operations."""

    association_id: Optional[str] = Field(default=None, max_length=64)
    project_id: Optional[str] = Field(default=None, max_length=64)
    visit_date: date
    monitoring_type: str = Field(default="site_visit", max_length=50)
    monitored_by: Optional[str] = Field(default=None, max_length=150)
    findings: Optional[str] = None
    recommendations: Optional[str] = None
    status: str = Field(default="completed", max_length=30)


class MonitoringRecordCreate(MonitoringRecordBase):
    """Schema used when logging a monitoring visit."""

    id: Optional[str] = Field(default=None, max_length=64)


class MonitoringRecordUpdate(BaseModel):
    """Schema used when updating a monitoring visit."""

    association_id: Optional[str] = Field(default=None, max_length=64)
    project_id: Optional[str] = Field(default=None, max_length=64)
    visit_date: Optional[date] = None
    monitoring_type: Optional[str] = Field(default=None, max_length=50)
    monitored_by: Optional[str] = Field(default=None, max_length=150)
    findings: Optional[str] = None
    recommendations: Optional[str] = None
    status: Optional[str] = Field(default=None, max_length=30)

    @field_validator("visit_date", "monitoring_type", "status")
    @classmethod
    def _reject_null(cls, value):
        return reject_null(value)


class MonitoringRecordRead(DocumentRead, MonitoringRecordBase):
    """Schema used when returning monitoring data."""

    is_archived: bool = False

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MonitoringRecordListResponse(PaginatedResponse[MonitoringRecordRead]):
    """Paginated monitoring listing."""
