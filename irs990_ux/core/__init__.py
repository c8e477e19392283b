"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Error hierarchy
- defaults.py: Default field tables and EIN batches
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import (
    DocumentRef,
    FieldDefinition,
    FieldSpec,
    MatchStatus,
    PathMatch,
    ExtractedRow,
    SkippedDocument,
    Report,
    merge_fields,
)
from .errors import (
    Irs990Error,
    CacheDirectoryError,
    FieldSpecError,
    FetchError,
    ExtractionError,
    NoDataFoundError,
    IndexCacheError,
)
from .ports import ReturnRepository, IndexScanner, ReturnFetcher, FieldExtractor, ReportWriter
from .services import (
    ResolveFilingsService,
    FetchReturnService,
    ExtractFieldsService,
    BuildReportService,
    ExportReportService,
)

__all__ = [
    # Domain models
    "DocumentRef",
    "FieldDefinition",
    "FieldSpec",
    "MatchStatus",
    "PathMatch",
    "ExtractedRow",
    "SkippedDocument",
    "Report",
    "merge_fields",
    # Errors
    "Irs990Error",
    "CacheDirectoryError",
    "FieldSpecError",
    "FetchError",
    "ExtractionError",
    "NoDataFoundError",
    "IndexCacheError",
    # Ports
    "ReturnRepository",
    "IndexScanner",
    "ReturnFetcher",
    "FieldExtractor",
    "ReportWriter",
    # Services
    "ResolveFilingsService",
    "FetchReturnService",
    "ExtractFieldsService",
    "BuildReportService",
    "ExportReportService",
]
