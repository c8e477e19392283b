"""
Field spec file loader

A field spec file is a JSON object mapping xpath alternatives to column
names:

    {
      "/Return/ReturnData/IRS990/MissionDesc | /Return/ReturnData/IRS990/ActivityOrMissionDescription": "Mission"
    }
"""
import json
from pathlib import Path

from ..core.domain import FieldSpec
from ..core.errors import FieldSpecError


def load_field_spec(path: str | Path) -> FieldSpec:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise FieldSpecError(f"Cannot read field spec {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FieldSpecError(f"Invalid JSON in field spec {path}: {e}") from e

    if not isinstance(data, dict):
        raise FieldSpecError(f"Field spec {path} must be a JSON object of xpath => column name")

    for key, column in data.items():
        if not isinstance(column, str):
            raise FieldSpecError(f"Column name for {key!r} must be a string")

    spec = FieldSpec.from_mapping(data)
    empty = [f.column for f in spec if not f.alternatives]
    if empty:
        raise FieldSpecError(f"No xpath given for column(s): {', '.join(empty)}")
    return spec
