"""Pydantic schemas for livestock performance observations and metrics."""

from __future__ import annotations

import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelDocumentRead, CamelModel


class PigPerformanceBase(CamelModel):
    """A single weigh-in or health observation."""

    pig_id: str = Field(..., min_length=1, max_length=64)
    caretaker_id: Optional[str] = Field(default=None, max_length=64)
    association_id: Optional[str] = Field(default=None, max_length=64)
    date: datetime.date
    weight: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    weight_gain: Optional[float] = Field(default=None, allow_inf_nan=False)
    feed_conversion_ratio: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    health_score: Optional[float] = Field(default=None, ge=0, le=100, allow_inf_nan=False)
    mortality: bool = False


class PigPerformanceCreate(PigPerformanceBase):
    """Schema used when recording an observation."""


class PigPerformanceRead(CamelDocumentRead, PigPerformanceBase):
    """Schema used when returning an observation."""


class MonthlyPerformance(CamelModel):
    """Herd averages for one calendar month."""

    month: str
    month_number: int = Field(..., ge=1, le=12)
    average_weight: float
    weight_gain: float
    feed_conversion_ratio: float
    mortality_count: int
    total_pigs: int
    health_score: float


class PerformanceMetrics(CamelModel):
    """Yearly herd performance with its monthly breakdown."""

    year: int
    total_pigs: int
    average_weight_gain: float
    mortality_rate: float
    feed_conversion_ratio: float
    average_health_score: float
    monthly_data: List[MonthlyPerformance]
