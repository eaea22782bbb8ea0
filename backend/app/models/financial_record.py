"""SQLAlchemy model for verified financial transactions."""

from __future__ import annotations

import enum

from sqlalchemy import Column, Date, Enum, Float, Index, String, Text

from ..database import Base
from .base import ArchivableMixin, DocumentMixin


class RecordType(str, enum.Enum):
    """Kinds of transactions tracked per project."""

    INCOME = "income"
    EXPENSE = "expense"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    LOAN = "loan"


class FinancialRecord(ArchivableMixin, DocumentMixin, Base):
    """One verified transaction belonging to a project or association."""

    __tablename__ = "financial_records"

    project_id = Column(String(64), nullable=False)
    association_id = Column(String(64), nullable=True)
    record_date = Column(Date, nullable=False)
    record_type = Column(
        Enum(
            RecordType,
            name="financial_record_type_enum",
            native_enum=False,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )
    amount = Column(Float, nullable=False, default=0)
    description = Column(Text, nullable=True)
    note = Column(Text, nullable=True)


Index("financial_records_project_date_idx", FinancialRecord.project_id, FinancialRecord.record_date)
Index("financial_records_association_idx", FinancialRecord.association_id)
