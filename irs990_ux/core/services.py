"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from .domain import DocumentRef, ExtractedRow, FieldSpec, Report, SkippedDocument, merge_fields
from .errors import ExtractionError, FetchError, IndexCacheError, NoDataFoundError
from .ports import FieldExtractor, IndexScanner, ReportWriter, ReturnFetcher, ReturnRepository

logger = logging.getLogger(__name__)


class ResolveFilingsService:
    """Use case: Map an EIN to the returns listed in the bulk index files"""

    def __init__(self, repository: ReturnRepository, scanner: IndexScanner):
        self.repository = repository
        self.scanner = scanner

    def execute(self, ein: str, refresh: bool = False) -> list[DocumentRef]:
        """
        Return index entries for an EIN.

        A cached entry is returned as-is, even if newer index files have been
        downloaded since. Delete the cache entry (or pass refresh=True) to
        rescan. Nothing is cached when no entries are found.
        """
        cached = self.repository.get_index(ein) if not refresh else None
        if cached is not None:
            return cached

        refs = list(self.scanner.scan(ein))
        if refs:
            self.repository.save_index(ein, refs)
        else:
            logger.info("No index entries found for EIN %s", ein)
        return refs


class FetchReturnService:
    """Use case: Get a local copy of a return, downloading it if needed"""

    def __init__(self, repository: ReturnRepository, fetcher: ReturnFetcher):
        self.repository = repository
        self.fetcher = fetcher

    def execute(self, ein: str, object_id: str, force_refetch: bool = False) -> Path:
        """
        Return the cached path of a return.

        Cached returns are never revalidated. Raises FetchError if the
        download fails; there is no retry.
        """
        cached_path = self.repository.get_return(ein, object_id) if not force_refetch else None
        if cached_path:
            return cached_path

        logger.info("Fetching %s - %s from IRS...", ein, object_id)
        content = self.fetcher.fetch(object_id)
        return self.repository.save_return(ein, object_id, content)


class ExtractFieldsService:
    """Use case: Pull one row of field values out of a return"""

    def __init__(self, extractor: FieldExtractor):
        self.extractor = extractor

    def execute(self, path: Path, spec: FieldSpec) -> list[Optional[str]]:
        values = self.extractor.extract(path, spec)
        if len(values) != len(spec):
            raise ExtractionError(
                path, None, ValueError(f"expected {len(spec)} values, got {len(values)}")
            )
        return values


class BuildReportService:
    """Use case: Resolve, fetch and extract returns for EINs into a Report"""

    def __init__(
        self,
        resolve_service: ResolveFilingsService,
        fetch_service: FetchReturnService,
        extract_service: ExtractFieldsService,
        common_fields: FieldSpec
    ):
        self.resolve_service = resolve_service
        self.fetch_service = fetch_service
        self.extract_service = extract_service
        self.common_fields = common_fields

    def execute(
        self,
        eins: Iterable[str],
        fields: Optional[FieldSpec] = None,
        refresh_index: bool = False,
        force_refetch: bool = False
    ) -> Report:
        """
        Build a report for every return of every EIN.

        Failed fetches and extractions are logged and skipped. Raises
        NoDataFoundError when no rows were produced at all.
        """
        eins = list(eins)
        spec = merge_fields(self.common_fields, fields)
        report = Report(header=spec.columns)

        for ein in eins:
            logger.info("Finding data for EIN %s", ein)
            try:
                refs = self.resolve_service.execute(ein, refresh=refresh_index)
            except IndexCacheError as e:
                logger.error("Skipping EIN %s: %s", ein, e)
                report.skipped.append(SkippedDocument(ein, "", str(e), e.path))
                continue
            for ref in refs:
                row = self._process(ein, ref, spec, report, force_refetch)
                if row is not None:
                    report.add_row(row)

        if not report.rows:
            raise NoDataFoundError(eins, report.skipped)

        return report

    def _process(
        self,
        ein: str,
        ref: DocumentRef,
        spec: FieldSpec,
        report: Report,
        force_refetch: bool
    ) -> Optional[ExtractedRow]:
        try:
            path = self.fetch_service.execute(ein, ref.object_id, force_refetch=force_refetch)
        except FetchError as e:
            logger.warning("Skipping %s - %s: %s", ein, ref.object_id, e)
            report.skipped.append(SkippedDocument(ein, ref.object_id, str(e)))
            return None

        try:
            values = self.extract_service.execute(path, spec)
        except ExtractionError as e:
            logger.error("Skipping %s: %s", path, e)
            report.skipped.append(SkippedDocument(ein, ref.object_id, str(e), path))
            return None

        return ExtractedRow(ein=ein, object_id=ref.object_id, values=values)


class ExportReportService:
    """Use case: Build a report and write it out as CSV"""

    def __init__(self, build_service: BuildReportService, writer: ReportWriter):
        self.build_service = build_service
        self.writer = writer

    def execute(
        self,
        eins: Iterable[str],
        output: Path | str,
        fields: Optional[FieldSpec] = None,
        refresh_index: bool = False,
        force_refetch: bool = False
    ) -> tuple[Path, Report]:
        """Write the report to output; nothing is written if no data was found"""
        report = self.build_service.execute(
            eins, fields, refresh_index=refresh_index, force_refetch=force_refetch
        )
        path = self.writer.write(report.header, [r.values for r in report.rows], Path(output))
        return path, report
