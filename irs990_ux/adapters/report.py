"""
CSV Report Adapter

Implements ReportWriter port with pandas.
"""
from pathlib import Path
from typing import Optional

import pandas as pd

from ..core.ports import ReportWriter


def to_dataframe(header: list[str], rows: list[list[Optional[str]]]) -> pd.DataFrame:
    """Rows as an object-dtype DataFrame so values are written exactly as extracted"""
    return pd.DataFrame(rows, columns=header, dtype=object)


class CsvReportWriter(ReportWriter):
    """Writes a report as CSV (header row first, minimal quoting)"""

    def write(self, header: list[str], rows: list[list[Optional[str]]], path: Path) -> Path:
        path = Path(path)
        df = to_dataframe(header, rows)
        df.to_csv(path, index=False, na_rep="", lineterminator="\n")
        return path
