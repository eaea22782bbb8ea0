"""SQLAlchemy model for member associations."""

from __future__ import annotations

import enum

from sqlalchemy import Column, Enum, Float, Index, Integer, String, Text

from ..database import Base
from .base import ArchivableMixin, DocumentMixin


class AssociationStatus(str, enum.Enum):
    """Lifecycle status of an association."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"
    ARCHIVED = "archived"


class Association(ArchivableMixin, DocumentMixin, Base):
    """Member organisation that is the subject of financial tracking."""

    __tablename__ = "associations"
    __archive_values__ = {"status": AssociationStatus.ARCHIVED}
    __restore_values__ = {"status": AssociationStatus.ACTIVE}

    name = Column(String(200), nullable=False)
    status = Column(
        Enum(
            AssociationStatus,
            name="association_status_enum",
            native_enum=False,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=AssociationStatus.ACTIVE,
    )
    active_members = Column(Integer, nullable=False, default=0)
    inactive_members = Column(Integer, nullable=False, default=0)
    location = Column(String(200), nullable=True)
    contact_person = Column(String(150), nullable=True)
    contact_number = Column(String(50), nullable=True)
    email = Column(String(150), nullable=True)
    operational_reason = Column(Text, nullable=True)
    sustainability_score = Column(Float, nullable=True)
    compliance_rate = Column(Float, nullable=True)

    @property
    def total_members(self) -> int:
        return (self.active_members or 0) + (self.inactive_members or 0)


Index("associations_status_idx", Association.status)
