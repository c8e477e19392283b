"""
Plain-text formatters for handler results

Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any


def _format_skipped(skipped: list[dict[str, Any]]) -> list[str]:
    lines = [f"SKIPPED ({len(skipped)})"]
    lines.append("─" * 70)
    for s in skipped:
        where = f"{s['ein']} - {s['object_id']}" if s["object_id"] else s["ein"]
        lines.append(f"  {where}: {s['reason']}")
    return lines


def format_report_result(result: dict[str, Any]) -> str:
    """Format build_report result.

    Example output:
        IRS 990 REPORT | 2 EINs | 7 rows

        COLUMNS:     58
        PATH:        /data/irs990/irs990output.csv

        SKIPPED (1)
        ──────────────────────────────────────────────────────────────────────
          470825376 - 201302...: get_return(201302...) returned code 404
    """
    if not result.get("success"):
        lines = [f"ERROR: {result.get('error', 'Unknown error')}"]
        if result.get("skipped"):
            lines.append("")
            lines.extend(_format_skipped(result["skipped"]))
        return "\n".join(lines)

    eins = result["eins"]
    ein_str = eins[0] if len(eins) == 1 else f"{len(eins)} EINs"
    lines = [f"IRS 990 REPORT | {ein_str} | {result['row_count']} rows"]
    lines.append("")
    lines.append(f"COLUMNS:     {len(result['columns'])}")
    lines.append(f"PATH:        {result['path']}")

    if result.get("skipped"):
        lines.append("")
        lines.extend(_format_skipped(result["skipped"]))

    return "\n".join(lines)


def format_list_returns(result: dict[str, Any]) -> str:
    """Format list_returns result.

    Example output:
        EIN 043594598 | 5 returns

          201533189349300408  Python Software Foundation  (cached)
          201643199349301004  Python Software Foundation
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    lines = [f"EIN {result['ein']} | {result['count']} returns"]
    if not result["returns"]:
        lines.append("")
        lines.append("NO RETURNS FOUND IN INDEX FILES")
        return "\n".join(lines)

    lines.append("")
    for r in result["returns"]:
        cached = "  (cached)" if r["cached"] else ""
        lines.append(f"  {r['object_id']:<20}{r['taxpayer_name']}{cached}")

    return "\n".join(lines)


def format_list_cached(result: dict[str, Any]) -> str:
    """Format list_cached result as one line per EIN"""
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    lines = [f"CACHE {result['cache_dir']} | {result['count']} EINs"]
    lines.append("")
    for entry in result["eins"]:
        size_kb = entry["size_bytes"] / 1024
        lines.append(f"  {entry['ein']}  {len(entry['returns'])} returns  {size_kb:.0f} KB")

    return "\n".join(lines)
