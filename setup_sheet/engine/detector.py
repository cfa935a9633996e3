"""Layout detection for uploaded schedule tables.

Two layouts are supported. A column schedule has one row per shift with
explicit name/start/end/area/day columns. A weekly roster has one row per
employee and one column per calendar day, each cell holding shift text.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from setup_sheet.config import (
    COLUMN_FORMAT,
    DAY_ABBREVIATIONS,
    DAY_IDS,
    FORMAT_SAMPLE_ROWS,
    HEADER_DATE_PATTERN,
    HEADER_DAY_DATE_PATTERN,
    KNOWN_ROSTER_DATES,
    MONTH_NAMES,
    NAME_HEADER_HINTS,
    ROSTER_NAME_HEADERS,
    SHIFT_TEXT_MARKERS,
    WEEKLY_ROSTER_FORMAT,
)
from setup_sheet.domain.models import (
    ColumnFormat,
    ColumnMapping,
    RawTable,
    TableLayout,
    ValidationError,
    WeeklyRosterFormat,
    table_headers,
)
from setup_sheet.engine.normalizers import is_blank

logger = logging.getLogger(__name__)


def _is_day_header(header: str) -> bool:
    key = header.strip().lower()
    return key in DAY_IDS or key in DAY_ABBREVIATIONS


def _is_date_header(header: str) -> bool:
    text = header.strip()
    if HEADER_DATE_PATTERN.match(text) or HEADER_DAY_DATE_PATTERN.match(text):
        return True
    lower = text.lower()
    if any(month in lower for month in MONTH_NAMES):
        return True
    return any(known in text for known in KNOWN_ROSTER_DATES)


def _starts_with_day_abbreviation(header: str) -> bool:
    return header.strip()[:3].lower() in DAY_ABBREVIATIONS


def _has_embedded_shift_text(table: RawTable, skip_columns: Iterable[str]) -> bool:
    if len(table) <= 1:
        return False
    skip = set(skip_columns)
    for row in table[:FORMAT_SAMPLE_ROWS]:
        for column, value in row.items():
            if column in skip or is_blank(value) or not isinstance(value, str):
                continue
            if any(marker in value for marker in SHIFT_TEXT_MARKERS):
                return True
    return False


def detect_format(table: RawTable, mapping: Optional[ColumnMapping] = None) -> str:
    """Return ``"weekly-roster"`` or ``"column"`` for the given table.

    Any one roster signal is enough: a day-name header, a date-like header, a
    header starting with a day abbreviation ("Sun, 5/18/25"), or shift-time
    text in the sampled cells. Columns bound by the column mapping are left out
    of the cell sample, since start/end times live there in column schedules.
    This narrows the plain "any sampled cell" check so a multi-row column
    schedule with "12:00 PM" times is not taken for a roster.
    """
    mapping = mapping or ColumnMapping()
    headers = [str(header) for header in table_headers(table)]

    for header in headers:
        if _is_day_header(header):
            logger.debug("Header %r names a day", header)
            return WEEKLY_ROSTER_FORMAT
        if _is_date_header(header):
            logger.debug("Header %r looks like a date", header)
            return WEEKLY_ROSTER_FORMAT
        if _starts_with_day_abbreviation(header):
            logger.debug("Header %r starts with a day abbreviation", header)
            return WEEKLY_ROSTER_FORMAT

    if _has_embedded_shift_text(table, mapping.bound_columns()):
        logger.debug("Sampled cells contain shift-time text")
        return WEEKLY_ROSTER_FORMAT

    return COLUMN_FORMAT


def is_day_column(header: str) -> bool:
    text = str(header)
    return "/" in text or "," in text


def find_name_column(headers: List[str]) -> Optional[str]:
    """Pick the roster's employee column, falling back to the first column."""
    for candidate in ROSTER_NAME_HEADERS:
        if candidate in headers:
            return candidate
    if not headers or is_day_column(headers[0]):
        return None
    return headers[0]


def has_name_column(headers: Iterable[str]) -> bool:
    return any(hint in str(header).lower() for header in headers for hint in NAME_HEADER_HINTS)


def roster_layout(table: RawTable) -> WeeklyRosterFormat:
    headers = table_headers(table)
    name_column = find_name_column(headers)
    day_columns = tuple(h for h in headers if h != name_column and is_day_column(h))
    return WeeklyRosterFormat(headers=tuple(headers), name_column=name_column, day_columns=day_columns)


def detect_layout(table: RawTable, mapping: Optional[ColumnMapping] = None) -> TableLayout:
    """Detect the layout and return it as a ``ColumnFormat`` or ``WeeklyRosterFormat``."""
    if detect_format(table, mapping) == WEEKLY_ROSTER_FORMAT:
        return roster_layout(table)
    return ColumnFormat(headers=tuple(table_headers(table)))


def require_name_column(layout: TableLayout) -> None:
    """Raise when the layout has no column that can hold employee names."""
    if isinstance(layout, ColumnFormat):
        if not has_name_column(layout.headers):
            raise ValidationError(
                "No employee name column found. Add a column whose header contains 'Employee' or 'Name'."
            )
    elif isinstance(layout, WeeklyRosterFormat):
        if layout.name_column is None:
            raise ValidationError(
                "Could not identify the employee name column in the weekly roster. "
                "Name the first column 'Employee' or 'Name'."
            )
    else:
        raise TypeError(f"Unknown table layout: {layout!r}")
