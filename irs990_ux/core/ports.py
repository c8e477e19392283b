"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional

from .domain import DocumentRef, FieldSpec


class ReturnRepository(ABC):
    """Port for the local index cache and return cache"""

    @abstractmethod
    def get_index(self, ein: str) -> Optional[list[DocumentRef]]:
        """Get cached index entries for an EIN, None if never cached"""
        pass

    @abstractmethod
    def save_index(self, ein: str, refs: list[DocumentRef]) -> Path:
        """Persist index entries for an EIN, return path"""
        pass

    @abstractmethod
    def get_return(self, ein: str, object_id: str) -> Optional[Path]:
        """Get path to cached return XML if it exists"""
        pass

    @abstractmethod
    def save_return(self, ein: str, object_id: str, content: bytes) -> Path:
        """Save return XML verbatim, return path"""
        pass

    @abstractmethod
    def list_cached_eins(self) -> list[str]:
        """List EINs that have a cached index entry"""
        pass


class IndexScanner(ABC):
    """Port for scanning bulk index files"""

    @abstractmethod
    def scan(self, ein: str) -> Iterator[DocumentRef]:
        """Yield every index row for an EIN, in file then row order"""
        pass


class ReturnFetcher(ABC):
    """Port for downloading returns from the IRS store"""

    @abstractmethod
    def fetch(self, object_id: str) -> bytes:
        """Download raw return XML, raise FetchError on failure"""
        pass


class FieldExtractor(ABC):
    """Port for extracting field values from a return"""

    @abstractmethod
    def extract(self, path: Path, spec: FieldSpec) -> list[Optional[str]]:
        """One value per field in spec order, None where nothing matched"""
        pass


class ReportWriter(ABC):
    """Port for writing a finished report"""

    @abstractmethod
    def write(self, header: list[str], rows: list[list[Optional[str]]], path: Path) -> Path:
        """Write header and rows as a table, return path"""
        pass
