"""
MCP Tool Handlers

Shared handlers used by the MCP server and the CLI.
Each returns a plain dict with a "success" flag.
"""
import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from ...container import Container
from ...core.defaults import DEFAULT_FIELD_SPEC
from ...core.domain import SkippedDocument
from ...core.errors import Irs990Error, NoDataFoundError
from ..fieldspec import load_field_spec
from ..filesystem import IRS_EXTENSION

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_CSV = "irs990output.csv"


def _skipped_dicts(skipped: Sequence[SkippedDocument]) -> list[dict[str, Any]]:
    return [
        {
            "ein": s.ein,
            "object_id": s.object_id,
            "reason": s.reason,
            "path": str(s.path) if s.path else None,
        }
        for s in skipped
    ]


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    def resolve_output(self, output: Optional[str]) -> Path:
        """Relative output paths land in the cache directory"""
        path = Path(output or DEFAULT_OUTPUT_CSV)
        if not path.is_absolute():
            path = self.container.cache.cache_dir / path
        return path

    async def build_report(
        self,
        eins: Sequence[str],
        output: Optional[str] = None,
        fields_file: Optional[str] = None,
        refresh_index: bool = False,
        force_refetch: bool = False
    ) -> dict[str, Any]:
        """Build the CSV report for one or more EINs"""
        try:
            fields = load_field_spec(fields_file) if fields_file else DEFAULT_FIELD_SPEC
            output_path = self.resolve_output(output)

            path, report = await asyncio.to_thread(
                self.container.export_report.execute,
                eins,
                output_path,
                fields=fields,
                refresh_index=refresh_index,
                force_refetch=force_refetch
            )

            return {
                "success": True,
                "path": str(path),
                "eins": list(eins),
                "row_count": len(report.rows),
                "columns": report.header,
                "skipped": _skipped_dicts(report.skipped),
            }

        except NoDataFoundError as e:
            return {
                "success": False,
                "error": str(e),
                "eins": list(eins),
                "skipped": _skipped_dicts(e.skipped),
            }
        except Irs990Error as e:
            return {
                "success": False,
                "error": str(e)
            }
        except Exception as e:
            logger.exception("build_report failed")
            return {
                "success": False,
                "error": f"Failed to build report: {str(e)}"
            }

    def _indexed_returns(self, ein: str, refresh_index: bool) -> list[dict[str, Any]]:
        refs = self.container.resolve_filings.execute(ein, refresh=refresh_index)
        returns = []
        for ref in refs:
            path = self.container.cache.get_return(ein, ref.object_id)
            returns.append({
                "object_id": ref.object_id,
                "taxpayer_name": ref.taxpayer_name,
                "cached": path is not None,
                "path": str(path) if path else None,
            })
        return returns

    async def list_returns(self, ein: str, refresh_index: bool = False) -> dict[str, Any]:
        """List returns indexed for an EIN and whether each is downloaded"""
        try:
            returns = await asyncio.to_thread(self._indexed_returns, ein, refresh_index)

            return {
                "success": True,
                "ein": ein,
                "count": len(returns),
                "returns": returns,
            }

        except Irs990Error as e:
            return {
                "success": False,
                "error": str(e)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to list returns: {str(e)}"
            }

    def _cached_entries(self) -> list[dict[str, Any]]:
        cache = self.container.cache
        entries = []
        for ein in cache.list_cached_eins():
            paths = cache.list_returns(ein)
            entries.append({
                "ein": ein,
                "returns": [p.name[:-len(IRS_EXTENSION)] for p in paths],
                "size_bytes": sum(p.stat().st_size for p in paths),
            })
        return entries

    async def list_cached(self) -> dict[str, Any]:
        """List EINs with a cached index entry and their downloaded returns"""
        try:
            entries = await asyncio.to_thread(self._cached_entries)

            return {
                "success": True,
                "cache_dir": str(self.container.cache.cache_dir),
                "count": len(entries),
                "eins": entries,
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to list cached returns: {str(e)}"
            }
