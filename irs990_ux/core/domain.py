"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

# Alternatives inside a field key are separated by this delimiter
ALTERNATIVE_DELIMITER = "|"


@dataclass(frozen=True)
class DocumentRef:
    """One filed 990 return listed in a bulk index for an EIN"""
    object_id: str
    taxpayer_name: str


@dataclass(frozen=True)
class FieldDefinition:
    """A logical field: ordered xpath alternatives plus its column name"""
    alternatives: tuple[str, ...]
    column: str

    @property
    def key(self) -> str:
        return f" {ALTERNATIVE_DELIMITER} ".join(self.alternatives)


def split_alternatives(key: str) -> tuple[str, ...]:
    """Split 'xpath1 | xpath2' into ('xpath1', 'xpath2')"""
    parts = (p.strip() for p in key.split(ALTERNATIVE_DELIMITER))
    return tuple(p for p in parts if p)


@dataclass(frozen=True)
class FieldSpec:
    """Ordered set of fields to extract from each return"""
    fields: tuple[FieldDefinition, ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "FieldSpec":
        """Build from {"xpath1 | xpath2": "Column name", ...}"""
        return cls(tuple(
            FieldDefinition(split_alternatives(key), str(column))
            for key, column in mapping.items()
        ))

    def to_mapping(self) -> dict[str, str]:
        return {f.key: f.column for f in self.fields}

    @property
    def columns(self) -> list[str]:
        return [f.column for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self):
        return iter(self.fields)


def merge_fields(common: FieldSpec, fields: Optional[FieldSpec] = None) -> FieldSpec:
    """
    Merge the always-present fields with caller fields.

    Common keys come first; a caller key that repeats a common key replaces
    its column name but keeps its position. Both the report header and every
    row must be built from the FieldSpec returned here.
    """
    merged = common.to_mapping()
    if fields is not None:
        merged.update(fields.to_mapping())
    return FieldSpec.from_mapping(merged)


class MatchStatus(str, Enum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"
    INVALID = "invalid"


@dataclass(frozen=True)
class PathMatch:
    """Result of evaluating one xpath alternative"""
    xpath: str
    status: MatchStatus
    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.status is MatchStatus.MATCHED


@dataclass
class ExtractedRow:
    """Values pulled from one return, aligned with the merged FieldSpec"""
    ein: str
    object_id: str
    values: list[Optional[str]]


@dataclass
class SkippedDocument:
    """A return that could not be fetched or parsed"""
    ein: str
    object_id: str
    reason: str
    path: Optional[Path] = None


@dataclass
class Report:
    """Header plus extracted rows, ready to be written as a table"""
    header: list[str]
    rows: list[ExtractedRow] = field(default_factory=list)
    skipped: list[SkippedDocument] = field(default_factory=list)

    def add_row(self, row: ExtractedRow) -> None:
        if len(row.values) != len(self.header):
            raise ValueError(
                f"Row for {row.object_id} has {len(row.values)} values, header has {len(self.header)}"
            )
        self.rows.append(row)

