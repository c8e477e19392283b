"""
Bulk Index Adapter

Implements IndexScanner port over the IRS index_20??.csv files
(downloaded separately from the IRS AWS dataset).
"""
import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

from ..core.domain import DocumentRef
from ..core.errors import CacheDirectoryError
from ..core.ports import IndexScanner

logger = logging.getLogger(__name__)

INDEX_GLOB = "index_201*.csv"
EIN = "EIN"
OBJECT_ID = "OBJECT_ID"
TAXPAYER_NAME = "TAXPAYER_NAME"
INDEX_COLUMNS = (EIN, OBJECT_ID, TAXPAYER_NAME)


class CsvIndexScanner(IndexScanner):
    """Scans index CSV files for rows matching an EIN"""

    def __init__(self, index_dir: str | Path, pattern: str = INDEX_GLOB, chunksize: int = 100_000):
        self.index_dir = Path(index_dir)
        self.pattern = pattern
        self.chunksize = chunksize

    def index_files(self) -> list[Path]:
        if not self.index_dir.is_dir():
            raise CacheDirectoryError(self.index_dir)
        return sorted(self.index_dir.glob(self.pattern))

    def scan(self, ein: str) -> Iterator[DocumentRef]:
        """Yield matching rows; malformed rows and files are skipped"""
        for path in self.index_files():
            yield from self._scan_file(path, ein)

    def _scan_file(self, path: Path, ein: str) -> Iterator[DocumentRef]:
        try:
            reader = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                on_bad_lines="skip",
                encoding="utf-8",
                encoding_errors="replace",
                chunksize=self.chunksize,
            )
            with reader:
                for chunk in reader:
                    missing = [c for c in INDEX_COLUMNS if c not in chunk.columns]
                    if missing:
                        logger.warning("Skipping %s: missing columns %s", path.name, ", ".join(missing))
                        return
                    chunk = chunk.fillna("")
                    matches = chunk[chunk[EIN].str.strip() == ein]
                    for objid, name in zip(matches[OBJECT_ID], matches[TAXPAYER_NAME]):
                        objid = objid.strip()
                        if not objid:
                            continue
                        yield DocumentRef(object_id=objid, taxpayer_name=name.strip())
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable index file %s: %s", path.name, e)
