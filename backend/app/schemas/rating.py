"""Pydantic schemas for association rating snapshots."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .common import CamelDocumentRead, CamelModel


class AssociationRatingBase(CamelModel):
    """Attributes shared by create and read operations."""

    association_id: str = Field(..., min_length=1, max_length=64)
    association_name: str = Field(..., min_length=1, max_length=200)
    rating_period: str = Field(..., min_length=1, max_length=100)
    overall_rating: float = Field(..., ge=0, le=5)
    adjectival_rating: Optional[str] = None
    financial_performance: Optional[float] = Field(default=None, ge=0, le=5)
    operational_efficiency: Optional[float] = Field(default=None, ge=0, le=5)
    member_satisfaction: Optional[float] = Field(default=None, ge=0, le=5)
    compliance_score: Optional[float] = Field(default=None, ge=0, le=5)


class AssociationRatingCreate(AssociationRatingBase):
    """Schema used when recording a rating."""


class AssociationRatingRead(CamelDocumentRead, AssociationRatingBase):
    """Schema used when returning rating data."""


class AssociationRatingList(CamelModel):
    """Most recent rating snapshots."""

    items: List[AssociationRatingRead]
