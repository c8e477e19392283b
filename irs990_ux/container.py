"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from pathlib import Path
from typing import Optional

import httpx

from .adapters import FilesystemCache, CsvIndexScanner, IRSAdapter, LxmlExtractor, CsvReportWriter
from .adapters.irs import IRS_AWS_URL
from .core import (
    ResolveFilingsService,
    FetchReturnService,
    ExtractFieldsService,
    BuildReportService,
    ExportReportService,
)
from .core.defaults import COMMON_FIELD_SPEC
from .core.domain import FieldSpec


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        cache_dir: str | Path,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        common_fields: FieldSpec = COMMON_FIELD_SPEC
    ):
        # Adapters (infrastructure)
        self.cache = FilesystemCache(cache_dir)
        self.scanner = CsvIndexScanner(cache_dir)
        self.fetcher = IRSAdapter(base_url or IRS_AWS_URL, client=http_client)
        self.extractor = LxmlExtractor()
        self.writer = CsvReportWriter()

        # Services (use cases)
        self.resolve_filings = ResolveFilingsService(
            repository=self.cache,
            scanner=self.scanner
        )

        self.fetch_return = FetchReturnService(
            repository=self.cache,
            fetcher=self.fetcher
        )

        self.extract_fields = ExtractFieldsService(
            extractor=self.extractor
        )

        self.build_report = BuildReportService(
            resolve_service=self.resolve_filings,
            fetch_service=self.fetch_return,
            extract_service=self.extract_fields,
            common_fields=common_fields
        )

        self.export_report = ExportReportService(
            build_service=self.build_report,
            writer=self.writer
        )

    def close(self) -> None:
        self.fetcher.close()
