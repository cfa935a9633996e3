"""Dataclasses and type definitions shared across the importer modules."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from setup_sheet.config import (
    DEFAULT_AREA_COLUMN,
    DEFAULT_DAY_COLUMN,
    DEFAULT_END_COLUMN,
    DEFAULT_NAME_COLUMN,
    DEFAULT_POSITION,
    DEFAULT_START_COLUMN,
)

RawRow = Mapping[str, Any]
RawTable = Sequence[RawRow]


class ValidationError(ValueError):
    """Structural problem with an uploaded table. The import is aborted."""


def table_headers(table: RawTable) -> List[str]:
    """Return every column header in the table, in first-seen order."""
    headers: Dict[str, None] = {}
    for row in table:
        for key in row.keys():
            headers.setdefault(key, None)
    return list(headers)


@dataclass(frozen=True)
class ColumnMapping:
    """Which headers hold each field of a column-format schedule.

    ``day`` is optional; ``None`` means the sheet has no day column and every
    imported shift applies to all days.
    """

    name: str = DEFAULT_NAME_COLUMN
    start_time: str = DEFAULT_START_COLUMN
    end_time: str = DEFAULT_END_COLUMN
    area: str = DEFAULT_AREA_COLUMN
    day: Optional[str] = DEFAULT_DAY_COLUMN

    def required_columns(self) -> List[str]:
        return [self.name, self.start_time, self.end_time, self.area]

    def bound_columns(self) -> List[str]:
        columns = self.required_columns()
        if self.day:
            columns.append(self.day)
        return columns


@dataclass(frozen=True)
class Parsed:
    """A value the normalizers recognized with confidence."""

    value: Any

    @property
    def recognized(self) -> bool:
        return True


@dataclass(frozen=True)
class Unrecognized:
    """Raw input passed through unchanged so a person can review it."""

    raw: str

    @property
    def value(self) -> str:
        return self.raw

    @property
    def recognized(self) -> bool:
        return False


ParseOutcome = Union[Parsed, Unrecognized]


@dataclass(frozen=True)
class ShiftRecord:
    employee_name: str
    shift_start: str
    shift_end: str
    department: str
    day: Optional[str]
    source_format: str
    position: str = DEFAULT_POSITION
    is_leadership: bool = False
    source_column: Optional[str] = None
    unrecognized: Tuple[str, ...] = ()
    id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False)
    source_row: Optional[Mapping[str, Any]] = field(default=None, compare=False, repr=False)

    @property
    def time_block(self) -> str:
        return f"{self.shift_start} - {self.shift_end}"

    @property
    def needs_review(self) -> bool:
        return bool(self.unrecognized)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the field names the assignment grid expects."""
        return {
            "id": self.id,
            "employeeName": self.employee_name,
            "shiftStart": self.shift_start,
            "shiftEnd": self.shift_end,
            "department": self.department,
            "day": self.day,
            "timeBlock": self.time_block,
            "sourceFormat": self.source_format,
            "position": self.position,
            "isLeadership": self.is_leadership,
            "sourceColumn": self.source_column,
            "needsReview": list(self.unrecognized),
        }


def freeze_row(row: RawRow) -> Mapping[str, Any]:
    """Read-only copy of a raw row, kept on records as an audit back-reference."""
    return MappingProxyType(dict(row))


@dataclass(frozen=True)
class ColumnFormat:
    headers: Tuple[str, ...]


@dataclass(frozen=True)
class WeeklyRosterFormat:
    headers: Tuple[str, ...]
    name_column: Optional[str]
    day_columns: Tuple[str, ...]


TableLayout = Union[ColumnFormat, WeeklyRosterFormat]


@dataclass(frozen=True)
class ImportResult:
    records: List[ShiftRecord]
    warnings: List[str]
    source_format: str

    @property
    def needs_review(self) -> List[ShiftRecord]:
        return [record for record in self.records if record.needs_review]


@dataclass(frozen=True)
class PendingImport:
    """Staged import waiting for the user to confirm or cancel."""

    token: str
    preview: Tuple[Mapping[str, Any], ...]
    result: ImportResult
    row_count: int

    @property
    def records(self) -> List[ShiftRecord]:
        return self.result.records

    @property
    def warnings(self) -> List[str]:
        return self.result.warnings


class ImportState(Enum):
    IDLE = "idle"
    DETECTING = "detecting"
    VALIDATING = "validating"
    PARSING = "parsing"
    READY = "ready"
    COMMITTED = "committed"
