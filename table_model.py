from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union


@dataclass(frozen=True)
class DelimitedOrigin:
    encoding: str
    delimiter: str


@dataclass(frozen=True)
class SpreadsheetOrigin:
    format: str  # "xls" | "xlsx" | "ods"


Origin = Union[DelimitedOrigin, SpreadsheetOrigin]


def normalize_rows(rows) -> tuple[list[list[str]], int]:
    """Pad ragged rows with empty cells up to the widest row."""
    rows = [list(r) for r in rows or []]
    column_count = max((len(r) for r in rows), default=0)
    for r in rows:
        if len(r) < column_count:
            r.extend([""] * (column_count - len(r)))
    return rows, column_count


def sheet_label(index: int) -> str:
    return f"Sheet {index + 1}"


@dataclass
class Table:
    name: str
    rows: List[List[str]]
    column_count: int
    origin: Origin

    @classmethod
    def from_rows(cls, name, rows, origin: Origin) -> "Table":
        normalized, column_count = normalize_rows(rows)
        return cls(
            name=name, rows=normalized, column_count=column_count, origin=origin
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def source_encoding(self) -> Optional[str]:
        if isinstance(self.origin, DelimitedOrigin):
            return self.origin.encoding
        return None

    @property
    def source_delimiter(self) -> Optional[str]:
        if isinstance(self.origin, DelimitedOrigin):
            return self.origin.delimiter
        return None

    @property
    def dimensions(self) -> str:
        return f"{self.row_count}x{self.column_count}"


@dataclass
class Document:
    path: str
    tables: List[Table]
    file_size: int = 0
    modified: Optional[datetime] = None
    active_index: int = 0

    def __post_init__(self):
        if not self.tables:
            raise ValueError("a document holds at least one table")
        self.active_index = max(0, min(self.active_index, len(self.tables) - 1))

    @property
    def active(self) -> Table:
        return self.tables[self.active_index]

    @property
    def sheet_count(self) -> int:
        return len(self.tables)

    def is_workbook(self) -> bool:
        return isinstance(self.active.origin, SpreadsheetOrigin)

    def has_sheet(self, index: int) -> bool:
        return 0 <= index < len(self.tables)


@dataclass
class TableSet:
    """Named sheets as returned by a spreadsheet reader; rows may be ragged."""

    format: str
    sheets: List[tuple] = field(default_factory=list)  # (name, rows)
