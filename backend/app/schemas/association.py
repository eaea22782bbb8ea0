"""Pydantic schemas for association resources."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.association import AssociationStatus
from .common import CamelModel, DocumentRead, PaginatedResponse, reject_null


def _not_archived(status: AssociationStatus) -> AssociationStatus:
    if status == AssociationStatus.ARCHIVED:
        raise ValueError("use the archive endpoint to archive an association")
    return status


class AssociationBase(BaseModel):
    """Attributes shared by create and read operations."""

    name: str = Field(..., min_length=1, max_length=200)
    status: AssociationStatus = AssociationStatus.ACTIVE
    active_members: int = Field(default=0, ge=0)
    inactive_members: int = Field(default=0, ge=0)
    location: Optional[str] = None
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    operational_reason: Optional[str] = None
    sustainability_score: Optional[float] = Field(default=None, ge=0, le=100)
    compliance_rate: Optional[float] = Field(default=None, ge=0, le=100)


class AssociationCreate(AssociationBase):
    """Schema used when registering an association."""

    id: Optional[str] = Field(default=None, max_length=64)

    @field_validator("status")
    @classmethod
    def _reject_archived_status(cls, value: AssociationStatus) -> AssociationStatus:
        return _not_archived(value)


class AssociationUpdate(BaseModel):
    """Schema used when updating an association."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    status: Optional[AssociationStatus] = None
    active_members: Optional[int] = Field(default=None, ge=0)
    inactive_members: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    operational_reason: Optional[str] = None
    sustainability_score: Optional[float] = Field(default=None, ge=0, le=100)
    compliance_rate: Optional[float] = Field(default=None, ge=0, le=100)

    @field_validator("name", "status", "active_members", "inactive_members")
    @classmethod
    def _reject_null(cls, value):
        return reject_null(value)

    @field_validator("status")
    @classmethod
    def _reject_archived_status(cls, value: AssociationStatus) -> AssociationStatus:
        return _not_archived(value)


class AssociationRead(DocumentRead, AssociationBase):
    """Schema used when returning association data."""

    archived: bool = False
    total_members: int = 0

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class AssociationListResponse(PaginatedResponse[AssociationRead]):
    """Paginated association listing."""


class AssociationStats(CamelModel):
    """Headline counts for the association overview."""

    total_associations: int
    total_members: int
    growth_rate: int
