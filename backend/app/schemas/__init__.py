"""Expose Pydantic schemas for convenient imports."""

from .association import (
    AssociationBase,
    AssociationCreate,
    AssociationListResponse,
    AssociationRead,
    AssociationStats,
    AssociationUpdate,
)
from .common import CamelDocumentRead, CamelModel, DocumentRead, PaginatedResponse
from .dashboard import DashboardStats, FinancialSummary, TopPerformer, TrendPoint
from .financial_record import (
    FinancialDashboard,
    FinancialRecordBase,
    FinancialRecordCreate,
    FinancialRecordListResponse,
    FinancialRecordRead,
    FinancialRecordUpdate,
    RecordSummary,
    RecordTypeTotal,
)
from .financial_report import (
    AssociationReportSummary,
    FinancialReportCreate,
    FinancialReportGenerate,
    FinancialReportGenerated,
    FinancialReportInputs,
    FinancialReportListResponse,
    FinancialReportRead,
    FinancialReportUpdate,
    GroupReportSummary,
    PerformanceRating,
)
from .monitoring import (
    MonitoringRecordBase,
    MonitoringRecordCreate,
    MonitoringRecordListResponse,
    MonitoringRecordRead,
    MonitoringRecordUpdate,
)
from .performance import (
    MonthlyPerformance,
    PerformanceMetrics,
    PigPerformanceCreate,
    PigPerformanceRead,
)
from .rating import AssociationRatingCreate, AssociationRatingList, AssociationRatingRead

__all__ = [
    "AssociationBase",
    "AssociationCreate",
    "AssociationListResponse",
    "AssociationRead",
    "AssociationStats",
    "AssociationUpdate",
    "CamelDocumentRead",
    "CamelModel",
    "DocumentRead",
    "PaginatedResponse",
    "DashboardStats",
    "FinancialSummary",
    "TopPerformer",
    "TrendPoint",
    "FinancialDashboard",
    "FinancialRecordBase",
    "FinancialRecordCreate",
    "FinancialRecordListResponse",
    "FinancialRecordRead",
    "FinancialRecordUpdate",
    "RecordSummary",
    "RecordTypeTotal",
    "AssociationReportSummary",
    "FinancialReportCreate",
    "FinancialReportGenerate",
    "FinancialReportGenerated",
    "FinancialReportInputs",
    "FinancialReportListResponse",
    "FinancialReportRead",
    "FinancialReportUpdate",
    "GroupReportSummary",
    "PerformanceRating",
    "MonitoringRecordBase",
    "MonitoringRecordCreate",
    "MonitoringRecordListResponse",
    "MonitoringRecordRead",
    "MonitoringRecordUpdate",
    "MonthlyPerformance",
    "PerformanceMetrics",
    "PigPerformanceCreate",
    "PigPerformanceRead",
    "AssociationRatingCreate",
    "AssociationRatingList",
    "AssociationRatingRead",
]
