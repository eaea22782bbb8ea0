"""Column mixins shared by every document-style collection."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String

from ..db_types import ObjectIdString, new_object_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentMixin:
    """Dual identity plus audit timestamps.

    ``object_id`` is the native identifier (stored in the ``_id`` column) and
    ``id`` the application-level string identifier. Both are immutable once
    the row exists.
    """

    __archive_flag__ = "archived"
    __archive_values__ = {}
    __restore_values__ = {}

    object_id = Column("_id", ObjectIdString(), primary_key=True, default=new_object_id)
    id = Column("id", String(64), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    archived_at = Column(DateTime(timezone=True), nullable=True)


class ArchivableMixin:
    """Soft-delete flag used by most collections."""

    archived = Column(Boolean, nullable=False, default=False, server_default="0")


class MonitoringArchivableMixin:
    """Soft-delete flag used by monitoring-style collections."""

    __archive_flag__ = "is_archived"

    is_archived = Column(Boolean, nullable=False, default=False, server_default="0")
