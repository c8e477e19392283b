#!/usr/bin/env python3
"""
CLI for irs990-ux - fetch/parse IRS 990 XML returns by EIN into a CSV

Caches lists of object ids and XML copies of returns in the directory.
Download the index_20??.csv files from the IRS AWS dataset into the
directory first.

Usage:
  irs990 -e 043594598                      # All returns for one EIN
  irs990 -a                                # All major FOSS foundations
  irs990 -e 043594598 -f fields.json       # Custom fields (xpath => column JSON)
  irs990 -d ./irs990 -o python.csv -e 043594598
  irs990 -e 043594598 -l                   # List indexed returns, no download
  irs990 --list-cached                     # EINs cached in the directory
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from .adapters.mcp import MCPHandlers
from .container import Container
from .core.defaults import FOSS_FOUNDATIONS
from .core.errors import CacheDirectoryError
from .formatters import format_list_cached, format_list_returns, format_report_result
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


def get_default_cache_dir() -> str:
    """Get default cache directory from env or use the current directory"""
    return os.environ.get("IRS990_CACHE_DIR", os.getcwd())


def get_base_url() -> str | None:
    """Get IRS base URL override from env"""
    return os.environ.get("IRS990_BASE_URL")


async def report_command(
    eins: list[str],
    cache_dir: str,
    output: str,
    fields_file: str | None,
    refresh_index: bool,
    force_refetch: bool,
) -> int:
    """Build the CSV report"""
    try:
        container = Container(cache_dir=cache_dir, base_url=get_base_url())
    except CacheDirectoryError as e:
        print(f"Error: -d {e}", file=sys.stderr)
        return 1

    try:
        handlers = MCPHandlers(container)
        result = await handlers.build_report(
            eins=eins,
            output=output,
            fields_file=fields_file,
            refresh_index=refresh_index,
            force_refetch=force_refetch
        )
    finally:
        container.close()

    print(format_report_result(result))

    if not result["success"]:
        return 1

    print(f"DONE: check {result['path']} and ?????????.json files for data")
    return 0


async def list_returns_command(ein: str, cache_dir: str, refresh_index: bool) -> int:
    """Print the returns indexed for an EIN"""
    try:
        container = Container(cache_dir=cache_dir, base_url=get_base_url())
    except CacheDirectoryError as e:
        print(f"Error: -d {e}", file=sys.stderr)
        return 1

    try:
        result = await MCPHandlers(container).list_returns(ein, refresh_index=refresh_index)
    finally:
        container.close()

    print(format_list_returns(result))
    return 0 if result["success"] else 1


async def list_cached_command(cache_dir: str) -> int:
    """Print EINs with cached index entries"""
    try:
        container = Container(cache_dir=cache_dir, base_url=get_base_url())
    except CacheDirectoryError as e:
        print(f"Error: -d {e}", file=sys.stderr)
        return 1

    try:
        result = await MCPHandlers(container).list_cached()
    finally:
        container.close()

    print(format_list_cached(result))
    return 0 if result["success"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="irs990",
        description="irs990: Fetch/parse IRS 990 XML returns by EIN and return spreadsheets of selected fields"
    )
    parser.add_argument(
        "-d", "--directory",
        default=get_default_cache_dir(),
        help="Local directory holding index files and downloaded XML returns "
             "(default: $IRS990_CACHE_DIR or current directory)"
    )
    parser.add_argument(
        "-o", "--out",
        default="irs990output.csv",
        help="Output filename to write spreadsheet of data to, relative to the directory "
             "(default: irs990output.csv)"
    )
    parser.add_argument(
        "-f", "--fields",
        help="JSON file of xpath | alternatives => column name (optional)"
    )
    parser.add_argument(
        "-e", "--ein",
        help="EIN of a single organization to download and parse 990s from"
    )
    parser.add_argument(
        "-a", "--all-foundations",
        action="store_true",
        help="Download and parse all major FOSS foundations (may take a while on first run)"
    )
    parser.add_argument(
        "--refresh-index",
        action="store_true",
        help="Rescan index files even if an EIN's index cache exists"
    )
    parser.add_argument(
        "--force-refetch",
        action="store_true",
        help="Re-download returns even if cached"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging (shows unmatched xpaths)"
    )
    parser.add_argument(
        "-l", "--list-returns",
        action="store_true",
        help="List the returns indexed for -e EIN instead of building a spreadsheet"
    )
    parser.add_argument(
        "--list-cached",
        action="store_true",
        help="List EINs with cached index entries and downloaded returns"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_returns and not args.ein:
        parser.error("-l requires -e EIN")
    if not args.list_cached and not args.ein and not args.all_foundations:
        parser.error("either -e EIN or -a is required")

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list_cached:
        return asyncio.run(list_cached_command(args.directory))
    if args.list_returns:
        return asyncio.run(list_returns_command(args.ein, args.directory, args.refresh_index))

    if args.ein:
        logger.info("Finding data for EIN %s and parsing...", args.ein)
        eins = [args.ein]
    else:
        logger.info("Finding data for all common FOSS foundations... may take a while on first run")
        eins = list(FOSS_FOUNDATIONS)

    return asyncio.run(report_command(
        eins=eins,
        cache_dir=args.directory,
        output=args.out,
        fields_file=args.fields,
        refresh_index=args.refresh_index,
        force_refetch=args.force_refetch
    ))


if __name__ == "__main__":
    sys.exit(main())
