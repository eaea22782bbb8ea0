"""SQLAlchemy model for association rating snapshots."""

from __future__ import annotations

from sqlalchemy import Column, Float, Index, String

from ..database import Base
from .base import ArchivableMixin, DocumentMixin


class AssociationRating(ArchivableMixin, DocumentMixin, Base):
    """Periodic adjectival rating given to an association."""

    __tablename__ = "association_ratings"

    association_id = Column(String(64), nullable=False)
    association_name = Column(String(200), nullable=False)
    rating_period = Column(String(100), nullable=False)
    overall_rating = Column(Float, nullable=False, default=0)
    adjectival_rating = Column(String(50), nullable=True)
    financial_performance = Column(Float, nullable=True)
    operational_efficiency = Column(Float, nullable=True)
    member_satisfaction = Column(Float, nullable=True)
    compliance_score = Column(Float, nullable=True)


Index("association_ratings_created_idx", AssociationRating.created_at)
