"""Shared schema definitions."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Optional, Sequence, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Standard shape for paginated listings."""

    items: Sequence[T]
    total: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)
    skip: int = Field(..., ge=0)


class CamelModel(BaseModel):
    """Base for payloads exchanged with the dashboard in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DocumentRead(BaseModel):
    """Identity and audit fields present on every stored document."""

    object_id: str = Field(
        validation_alias=AliasChoices("object_id", "_id"),
        serialization_alias="_id",
    )
    id: str
    created_at: datetime
    updated_at: datetime
    archived_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CamelDocumentRead(CamelModel):
    """Camel-cased variant of :class:`DocumentRead`."""

    object_id: str = Field(
        validation_alias=AliasChoices("object_id", "_id"),
        serialization_alias="_id",
    )
    id: str
    created_at: datetime
    updated_at: datetime
    archived_at: Optional[datetime] = None


def reject_null(value: Optional[T]) -> T:
    """Refuse an explicit ``null`` for a field that is optional only in patches."""

    if value is None:
        raise ValueError("may be omitted but not null")
    return value
