"""
irs990-ux MCP Server

MCP delivery layer - wraps the handlers as MCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .container import Container
from .core.defaults import FOSS_FOUNDATIONS
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)

# Default cache directory (can be overridden via env var or CLI arg)
CACHE_DIR = os.getenv("IRS990_CACHE_DIR", os.getcwd())

HTTP_PORT = int(os.getenv("IRS990_HTTP_PORT", "6661"))
HTTP_HOST = os.getenv("IRS990_HTTP_HOST", "127.0.0.1")

mcp = FastMCP("irs990-ux", host=HTTP_HOST, port=HTTP_PORT)

_handlers: Optional[MCPHandlers] = None


def get_handlers() -> MCPHandlers:
    """Create handlers on first use so a bad cache dir is reported per call"""
    global _handlers
    if _handlers is None:
        _handlers = MCPHandlers(Container(cache_dir=CACHE_DIR, base_url=os.getenv("IRS990_BASE_URL")))
    return _handlers


@mcp.tool()
async def build_report(
    eins: list[str],
    output: Optional[str] = None,
    fields_file: Optional[str] = None,
    refresh_index: bool = False,
    force_refetch: bool = False
) -> dict:
    """
    Build a CSV of 990 fields for every return filed by the given EINs.

    Returns are downloaded from the IRS AWS bucket once and cached on disk.
    Returns that cannot be fetched or parsed are skipped and listed.

    Args:
        eins: EINs to report on, e.g. ["043594598"]. Pass ["FOSS"] for the
            built-in list of major FOSS foundations.
        output: CSV filename (relative paths land in the cache directory)
        fields_file: Optional JSON file of "xpath | xpath" => column name
        refresh_index: Rescan index files even if an EIN was cached
        force_refetch: Re-download returns even if cached

    Returns:
        Dictionary with CSV path, row count, columns and skipped returns.
    """
    try:
        handlers = get_handlers()
    except Exception as e:
        return {"success": False, "error": str(e)}

    if eins == ["FOSS"]:
        eins = list(FOSS_FOUNDATIONS)

    return await handlers.build_report(
        eins=eins,
        output=output,
        fields_file=fields_file,
        refresh_index=refresh_index,
        force_refetch=force_refetch
    )


@mcp.tool()
async def list_returns(ein: str) -> dict:
    """
    List 990 returns found in the index files for an EIN.

    Args:
        ein: EIN, digits only (e.g. "043594598")

    Returns:
        Object ids, taxpayer names and whether each return is cached.
    """
    try:
        handlers = get_handlers()
    except Exception as e:
        return {"success": False, "error": str(e)}

    return await handlers.list_returns(ein)


@mcp.tool()
async def list_cached() -> dict:
    """List EINs with cached index entries and their downloaded returns."""
    try:
        handlers = get_handlers()
    except Exception as e:
        return {"success": False, "error": str(e)}

    return await handlers.list_cached()


def main():
    """Main entry point for the MCP server."""
    global CACHE_DIR

    parser = argparse.ArgumentParser(
        description="irs990-ux: IRS 990 returns as CSV, over MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--cache-dir",
        default=None,
        help=f"Directory with index files and cached returns (default: {CACHE_DIR}, or set IRS990_CACHE_DIR env var)"
    )
    args = parser.parse_args()

    if args.cache_dir:
        CACHE_DIR = args.cache_dir

    configure_logging()

    if args.transport == "streamable-http":
        logger.info("Starting irs990-ux on http://%s:%s", HTTP_HOST, HTTP_PORT)
        logger.info("Cache directory: %s", CACHE_DIR)
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
