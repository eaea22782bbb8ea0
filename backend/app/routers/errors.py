"""Translation of service-layer failures into HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException, status

from ..services import (
    DuplicateRecordError,
    InvalidIdentifierError,
    RecordNotFoundError,
    ReportServiceError,
    RepositoryError,
)

SERVICE_ERRORS = (RepositoryError, InvalidIdentifierError, ReportServiceError)


def to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, DuplicateRecordError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
