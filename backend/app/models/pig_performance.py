"""SQLAlchemy model for livestock weigh-ins and health observations."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, Float, Index, String

from ..database import Base
from .base import ArchivableMixin, DocumentMixin


class PigPerformanceRecord(ArchivableMixin, DocumentMixin, Base):
    """One observation of a pig's weight, feed conversion and health."""

    __tablename__ = "pig_performance"

    pig_id = Column(String(64), nullable=False)
    caretaker_id = Column(String(64), nullable=True)
    association_id = Column(String(64), nullable=True)
    date = Column(Date, nullable=False)
    weight = Column(Float, nullable=True)
    weight_gain = Column(Float, nullable=True)
    feed_conversion_ratio = Column(Float, nullable=True)
    health_score = Column(Float, nullable=True)
    mortality = Column(Boolean, nullable=False, default=False, server_default="0")


Index("pig_performance_date_idx", PigPerformanceRecord.date)
Index("pig_performance_pig_idx", PigPerformanceRecord.pig_id)
