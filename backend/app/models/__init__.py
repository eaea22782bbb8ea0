"""Expose SQLAlchemy models for convenient imports."""

from .association import Association, AssociationStatus
from .association_rating import AssociationRating
from .base import utcnow
from .financial_record import FinancialRecord, RecordType
from .financial_report import FinancialReport
from .monitoring import MonitoringRecord
from .pig_performance import PigPerformanceRecord

__all__ = [
    "Association",
    "AssociationStatus",
    "AssociationRating",
    "FinancialRecord",
    "RecordType",
    "FinancialReport",
    "MonitoringRecord",
    "PigPerformanceRecord",
    "utcnow",
]
