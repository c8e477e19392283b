"""
Filesystem Cache Adapter

Implements ReturnRepository port using a local directory:

    <cache_dir>/<ein>.json                     index entries for an EIN
    <cache_dir>/<ein>/<object_id>_public.xml   downloaded returns
"""
import json
from pathlib import Path
from typing import Optional

from ..core.domain import DocumentRef
from ..core.errors import CacheDirectoryError, IndexCacheError
from ..core.ports import ReturnRepository

IRS_EXTENSION = "_public.xml"
INDEX_CACHE_EXTENSION = ".json"


class FilesystemCache(ReturnRepository):
    """Filesystem-based index and return cache"""

    def __init__(self, cache_dir: str | Path):
        self.cache_dir = Path(cache_dir)
        if not self.cache_dir.is_dir():
            raise CacheDirectoryError(self.cache_dir)

    def _index_path(self, ein: str) -> Path:
        return self.cache_dir / f"{ein}{INDEX_CACHE_EXTENSION}"

    def _ensure_dir(self, ein: str) -> Path:
        """Ensure return directory exists for EIN"""
        path = self.cache_dir / ein
        path.mkdir(exist_ok=True)
        return path

    def get_return_path(self, ein: str, object_id: str) -> Path:
        """Get path for a cached return (whether or not it exists)"""
        return self.cache_dir / ein / f"{object_id}{IRS_EXTENSION}"

    def get_index(self, ein: str) -> Optional[list[DocumentRef]]:
        path = self._index_path(ein)
        if not path.is_file():
            return None
        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
            return [DocumentRef(object_id=str(objid), taxpayer_name=str(name)) for objid, name in entries]
        except (ValueError, TypeError) as e:
            raise IndexCacheError(path, e) from e

    def save_index(self, ein: str, refs: list[DocumentRef]) -> Path:
        path = self._index_path(ein)
        entries = [[ref.object_id, ref.taxpayer_name] for ref in refs]
        path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        return path

    def get_return(self, ein: str, object_id: str) -> Optional[Path]:
        """Get path to cached return if it exists"""
        path = self.get_return_path(ein, object_id)
        return path if path.is_file() else None

    def save_return(self, ein: str, object_id: str, content: bytes) -> Path:
        """Save return bytes verbatim, return path"""
        self._ensure_dir(ein)
        path = self.get_return_path(ein, object_id)
        path.write_bytes(content)
        return path

    def list_cached_eins(self) -> list[str]:
        eins = [
            p.stem for p in self.cache_dir.glob(f"*{INDEX_CACHE_EXTENSION}")
            if p.is_file() and p.stem.isdigit()
        ]
        return sorted(eins)

    def list_returns(self, ein: str) -> list[Path]:
        """List downloaded returns for an EIN"""
        ein_dir = self.cache_dir / ein
        if not ein_dir.is_dir():
            return []
        return sorted(ein_dir.glob(f"*{IRS_EXTENSION}"))
