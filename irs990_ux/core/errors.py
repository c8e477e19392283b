"""
Errors raised by the core and its adapters.

Per-document errors (FetchError, ExtractionError) are contained by
BuildReportService; the others propagate to the CLI and MCP layers.
"""
from pathlib import Path
from typing import Optional, Sequence


class Irs990Error(Exception):
    """Base class for all irs990-ux errors"""


class CacheDirectoryError(Irs990Error, NotADirectoryError):
    """Cache/index directory is missing or not a directory"""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"{self.path} is not a valid directory")


class FieldSpecError(Irs990Error, ValueError):
    """Field spec file could not be loaded"""


class FetchError(Irs990Error):
    """Remote return could not be downloaded"""

    def __init__(self, object_id: str, status_code: Optional[int] = None, detail: str = ""):
        self.object_id = object_id
        self.status_code = status_code
        msg = f"get_return({object_id}) returned code {status_code!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ExtractionError(Irs990Error):
    """A return could not be parsed or evaluated"""

    def __init__(self, path: Path | str, field: Optional[str], cause: BaseException):
        self.path = Path(path)
        self.field = field
        self.cause = cause
        where = f" {field}" if field else ""
        super().__init__(f"extract({self.path}):{where} {cause}")


class NoDataFoundError(Irs990Error, ValueError):
    """No rows were produced for any of the requested EINs"""

    def __init__(self, eins: Sequence[str], skipped: Sequence = ()):
        self.eins = list(eins)
        self.skipped = list(skipped)
        if len(self.eins) == 1:
            msg = f"Could not find any data for EIN {self.eins[0]}, skipping write of csv"
        else:
            msg = "Could not find any data for all EINs, skipping write of csv"
        super().__init__(msg)


class IndexCacheError(Irs990Error):
    """An EIN's cached index entry is unreadable"""

    def __init__(self, path: Path | str, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Corrupt index cache {self.path} ({cause}); delete it to rescan the index files")
