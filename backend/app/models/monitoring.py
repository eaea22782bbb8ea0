"""SQLAlchemy model for project monitoring and site visits."""

from __future__ import annotations

from sqlalchemy import Column, Date, Index, String, Text

from ..database import Base
from .base import DocumentMixin, MonitoringArchivableMixin


class MonitoringRecord(MonitoringArchivableMixin, DocumentMixin, Base):
    """A monitoring visit recorded against an association or project."""

    __tablename__ = "monitoring_records"

    association_id = Column(String(64), nullable=True)
    project_id = Column(String(64), nullable=True)
    visit_date = Column(Date, nullable=False)
    monitoring_type = Column(String(50), nullable=False, default="site_visit")
    monitored_by = Column(String(150), nullable=True)
    findings = Column(Text, nullable=True)
    recommendations = Column(Text, nullable=True)
    status = Column(String(30), nullable=False, default="completed")


Index("monitoring_records_association_idx", MonitoringRecord.association_id)
