"""Custom SQLAlchemy column types for document-style identifiers."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from sqlalchemy.types import CHAR, TypeDecorator


def new_object_id() -> str:
    """Return a freshly generated native identifier in its hex form."""

    return str(ObjectId())


class ObjectIdString(TypeDecorator):
    """Native document identifier stored as a 24-character hex string.

    Accepts ``bson.ObjectId`` instances or their hex representation when
    binding and always hands back plain strings, so application code can keep
    treating identifiers as text regardless of the backing database.
    """

    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):  # type: ignore[override]
        return dialect.type_descriptor(CHAR(24))

    def process_bind_param(self, value: Any, dialect):  # type: ignore[override]
        if value is None:
            return value
        if isinstance(value, ObjectId):
            return str(value)
        text = str(value)
        if not ObjectId.is_valid(text):
            raise ValueError(f"{text!r} is not a valid object identifier")
        return text.lower()

    def process_result_value(self, value: Any, dialect):  # type: ignore[override]
        if value is None:
            return value
        return str(value)
