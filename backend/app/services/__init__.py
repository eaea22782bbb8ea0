"""Service layer encapsulating business logic for API routers."""

from .aggregation import RecordFilter
from .associations import AssociationService
from .dashboard import DashboardService
from .financial_derivation import DerivedFields, derive_report
from .financial_records import FinancialRecordService
from .financial_reports import FinancialReportService, ReportServiceError
from .identifiers import InvalidIdentifierError
from .monitoring import MonitoringService
from .performance import PerformanceService
from .ratings import RatingService
from .report_generator import derive_generated_report
from .repository import (
    DuplicateRecordError,
    InvalidPayloadError,
    RecordNotFoundError,
    Repository,
    RepositoryError,
)

__all__ = [
    "RecordFilter",
    "AssociationService",
    "DashboardService",
    "DerivedFields",
    "derive_report",
    "FinancialRecordService",
    "FinancialReportService",
    "ReportServiceError",
    "InvalidIdentifierError",
    "MonitoringService",
    "PerformanceService",
    "RatingService",
    "derive_generated_report",
    "DuplicateRecordError",
    "InvalidPayloadError",
    "RecordNotFoundError",
    "Repository",
    "RepositoryError",
]
