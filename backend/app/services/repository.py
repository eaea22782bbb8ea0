"""Generic persistence helpers implementing the shared record lifecycle rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import inspect, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from ..db_types import new_object_id
from ..models.base import utcnow
from .identifiers import NativeId, resolve_identifier

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

PROTECTED_FIELDS = frozenset(
    {
        "_id",
        "object_id",
        "id",
        "created_at",
        "createdAt",
        "updated_at",
        "updatedAt",
        "archived",
        "is_archived",
        "archived_at",
        "archivedAt",
    }
)


class RepositoryError(RuntimeError):
    """Base class for persistence failures raised by :class:`Repository`."""


class RecordNotFoundError(RepositoryError):
    """Raised when an identifier matches no stored record."""


class InvalidPayloadError(RepositoryError):
    """Raised when a payload references fields the collection does not define."""


class DuplicateRecordError(RepositoryError):
    """Raised when a record with the same application identifier already exists."""


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a single-document write."""

    matched_count: int
    modified_count: int


def strip_protected_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Drop identity and audit fields that callers may never set directly."""

    return {key: value for key, value in payload.items() if key not in PROTECTED_FIELDS}


class Repository(Generic[ModelT]):
    """Document-style CRUD over one SQLAlchemy model.

    Records are addressed by native or application identifiers, deletes are
    soft (the model's archive flag is set), and every update refreshes
    ``updated_at`` while refusing identity and audit fields.
    """

    def __init__(self, db: Session, model: Type[ModelT]) -> None:
        self.db = db
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__  # type: ignore[attr-defined]

    @property
    def archive_flag(self) -> str:
        return getattr(self.model, "__archive_flag__", "archived")

    @property
    def _archive_column(self):
        return getattr(self.model, self.archive_flag)

    def _writable_fields(self) -> set[str]:
        return set(inspect(self.model).column_attrs.keys()) - PROTECTED_FIELDS

    def _query(self) -> Query:
        return self.db.query(self.model)

    def _active_query(self) -> Query:
        column = self._archive_column
        return self._query().filter(or_(column.is_(False), column.is_(None)))

    def _archived_query(self) -> Query:
        return self._query().filter(self._archive_column.is_(True))

    @staticmethod
    def _apply_criteria(query: Query, model: Type[ModelT], criteria: Mapping[str, Any]) -> Query:
        for field, value in criteria.items():
            if value is None:
                continue
            query = query.filter(getattr(model, field) == value)
        return query

    def _paginate(
        self,
        query: Query,
        *,
        order_by: Sequence[Any] = (),
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[ModelT], int]:
        total = query.count()
        if order_by:
            query = query.order_by(*order_by)
        query = query.offset(max(skip, 0))
        if limit is not None:
            query = query.limit(max(limit, 1))
        return query.all(), total

    def list(
        self,
        *,
        criteria: Optional[Mapping[str, Any]] = None,
        filters: Iterable[Any] = (),
        order_by: Sequence[Any] = (),
        skip: int = 0,
        limit: Optional[int] = None,
        include_archived: bool = False,
    ) -> Tuple[List[ModelT], int]:
        """Return non-archived records matching ``criteria`` and the total count."""

        base = self._query() if include_archived else self._active_query()
        query = self._apply_criteria(base, self.model, criteria or {})
        for clause in filters:
            query = query.filter(clause)
        return self._paginate(query, order_by=order_by, skip=skip, limit=limit)

    def list_archived(
        self,
        *,
        criteria: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[Any] = (),
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[ModelT], int]:
        query = self._apply_criteria(self._archived_query(), self.model, criteria or {})
        return self._paginate(query, order_by=order_by, skip=skip, limit=limit)

    def find(self, *filters: Any, include_archived: bool = False) -> List[ModelT]:
        query = self._query() if include_archived else self._active_query()
        for clause in filters:
            query = query.filter(clause)
        return query.all()

    def find_one(self, *, include_archived: bool = False, **criteria: Any) -> Optional[ModelT]:
        query = self._query() if include_archived else self._active_query()
        return self._apply_criteria(query, self.model, criteria).first()

    def get(self, raw_id: object) -> Optional[ModelT]:
        """Look a record up by identifier, archived or not."""

        identifier = resolve_identifier(raw_id)
        if isinstance(identifier, NativeId):
            clause = self.model.object_id == str(identifier.value)  # type: ignore[attr-defined]
        else:
            clause = self.model.id == identifier.value  # type: ignore[attr-defined]
        return self._query().filter(clause).first()

    def require(self, raw_id: object) -> ModelT:
        record = self.get(raw_id)
        if record is None:
            raise RecordNotFoundError(f"{self.name} record {raw_id} not found")
        return record

    def create(self, payload: Mapping[str, Any]) -> ModelT:
        data = strip_protected_fields(payload)
        self._reject_unknown_fields(data)

        object_id = new_object_id()
        application_id = payload.get("id")
        if application_id:
            identifier = resolve_identifier(application_id)
            if isinstance(identifier, NativeId):
                object_id = str(identifier.value)
            application_id = str(identifier)
        else:
            application_id = object_id

        now = utcnow()
        record = self.model(**data)
        record.object_id = object_id  # type: ignore[attr-defined]
        record.id = application_id  # type: ignore[attr-defined]
        record.created_at = now  # type: ignore[attr-defined]
        record.updated_at = now  # type: ignore[attr-defined]
        setattr(record, self.archive_flag, False)
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateRecordError(
                f"A {self.name} record with id {application_id} already exists"
            ) from exc
        self.db.refresh(record)
        LOGGER.info("Created %s record", self.name, extra={"record_id": application_id})
        return record

    def update_one(self, raw_id: object, patch: Mapping[str, Any]) -> UpdateResult:
        """Apply ``patch`` to a single record and report matched/modified counts."""

        data = strip_protected_fields(patch)
        self._reject_unknown_fields(data)

        record = self.get(raw_id)
        if record is None:
            return UpdateResult(matched_count=0, modified_count=0)

        modified = self._assign(record, data)
        record.updated_at = utcnow()  # type: ignore[attr-defined]
        self._commit(record)
        return UpdateResult(matched_count=1, modified_count=1 if modified else 0)

    def update(self, raw_id: object, patch: Mapping[str, Any]) -> ModelT:
        result = self.update_one(raw_id, patch)
        if result.matched_count == 0:
            raise RecordNotFoundError(f"{self.name} record {raw_id} not found")
        return self.require(raw_id)

    def archive(self, raw_id: object) -> ModelT:
        values = {self.archive_flag: True, "archived_at": utcnow()}
        values.update(getattr(self.model, "__archive_values__", {}))
        record = self._set_lifecycle(raw_id, values)
        LOGGER.info("Archived %s record", self.name, extra={"record_id": str(raw_id)})
        return record

    def restore(self, raw_id: object) -> ModelT:
        values = {self.archive_flag: False, "archived_at": None}
        values.update(getattr(self.model, "__restore_values__", {}))
        record = self._set_lifecycle(raw_id, values)
        LOGGER.info("Restored %s record", self.name, extra={"record_id": str(raw_id)})
        return record

    def _set_lifecycle(self, raw_id: object, values: Mapping[str, Any]) -> ModelT:
        record = self.require(raw_id)
        self._assign(record, values)
        record.updated_at = utcnow()  # type: ignore[attr-defined]
        self._commit(record)
        self.db.refresh(record)
        return record

    def _commit(self, record: ModelT) -> None:
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            LOGGER.warning("Rejected %s write", self.name, extra={"error": str(exc.orig)})
            raise InvalidPayloadError(
                f"{self.name} record violates a required field or constraint"
            ) from exc

    @staticmethod
    def _assign(record: ModelT, values: Mapping[str, Any]) -> bool:
        modified = False
        for field, value in values.items():
            if getattr(record, field) != value:
                setattr(record, field, value)
                modified = True
        return modified

    def _reject_unknown_fields(self, data: Mapping[str, Any]) -> None:
        unknown = sorted(set(data) - self._writable_fields())
        if unknown:
            raise InvalidPayloadError(
                f"Unknown fields for {self.name}: {', '.join(unknown)}"
            )
