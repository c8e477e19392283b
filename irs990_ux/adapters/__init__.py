"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Filesystem-based index and return cache
- index.py: Bulk index CSV scanner
- irs.py: IRS AWS return fetcher (httpx)
- xpath.py: lxml field extractor
- report.py: CSV report writer
- fieldspec.py: JSON field spec loader
"""
from .filesystem import FilesystemCache
from .index import CsvIndexScanner
from .irs import IRSAdapter
from .xpath import LxmlExtractor
from .report import CsvReportWriter
from .fieldspec import load_field_spec

__all__ = [
    "FilesystemCache",
    "CsvIndexScanner",
    "IRSAdapter",
    "LxmlExtractor",
    "CsvReportWriter",
    "load_field_spec",
]
