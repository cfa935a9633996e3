"""Parser for weekly-roster schedules (one row per employee, one column per day).

A roster cell looks like::

    8:00 AM - 4:00 PM
    Leadership | BOH - Shift Leader

Only the first time range in a cell is read, even when the text holds more.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from setup_sheet.config import SHIFT_RANGE_PATTERN, WEEKLY_ROSTER_FORMAT
from setup_sheet.domain.models import (
    RawTable,
    ShiftRecord,
    ValidationError,
    WeeklyRosterFormat,
    freeze_row,
)
from setup_sheet.engine.detector import roster_layout
from setup_sheet.engine.normalizers import (
    classify_position,
    classify_roster_department,
    is_blank,
    parse_day,
    parse_time,
    sanitize_name,
)

logger = logging.getLogger(__name__)

_PERIODS = {"am": "AM", "a": "AM", "pm": "PM", "p": "PM"}


def day_token(header: str) -> str:
    """Text before the first comma: "Sun, 5/18/25" -> "Sun"."""
    return str(header).split(",", 1)[0].strip()


def cell_lines(value: Any) -> List[str]:
    return [line.strip() for line in str(value).splitlines() if line.strip()]


def _clock_text(clock: str, period: Optional[str]) -> str:
    if not period:
        return clock
    return f"{clock} {_PERIODS[period.lower()]}"


def find_shift_range(text: str) -> Optional[Tuple[str, str]]:
    """Return the raw start/end of the first ``H:MM[ AM] - H:MM[ PM]`` range in the text."""
    match = SHIFT_RANGE_PATTERN.search(text)
    if not match:
        return None
    start_clock, start_period, end_clock, end_period = match.groups()
    return _clock_text(start_clock, start_period), _clock_text(end_clock, end_period)


def parse_weekly_roster(
    table: RawTable, layout: Optional[WeeklyRosterFormat] = None
) -> Tuple[List[ShiftRecord], List[str]]:
    """Convert weekly-roster rows into shift records, one per (employee, day) cell.

    Blank cells and cells without a time range contribute nothing. Returns
    ``(records, warnings)``.

    Raises:
        ValidationError: If no employee name column can be identified.
    """
    layout = layout or roster_layout(table)
    if layout.name_column is None:
        raise ValidationError("Could not identify the employee name column in the weekly roster.")

    warnings: List[str] = []
    column_days = {}
    for column in layout.day_columns:
        token = day_token(column)
        outcome = parse_day(token)
        if outcome.recognized and outcome.value is not None:
            column_days[column] = (outcome.value, ())
        else:
            column_days[column] = (None, ("day",))
            warnings.append(f"Column '{column}': unrecognized day '{token}'")

    records: List[ShiftRecord] = []
    for index, row in enumerate(table):
        name = sanitize_name(row.get(layout.name_column))
        if not name:
            logger.debug("Skipping roster row %d: no employee name", index + 1)
            continue

        for column in layout.day_columns:
            value = row.get(column)
            if is_blank(value):
                continue
            lines = cell_lines(value)
            if not lines:
                continue
            joined = " ".join(lines)
            shift_range = find_shift_range(joined)
            if shift_range is None:
                logger.debug("No time range in %s / %s: %r", name, column, joined)
                continue

            day, unrecognized = column_days[column]
            unrecognized = list(unrecognized)
            start = parse_time(shift_range[0])
            end = parse_time(shift_range[1])
            if not start.recognized:
                unrecognized.append("shift_start")
                warnings.append(f"{name} ({column}): unrecognized start time '{start.value}'")
            if not end.recognized:
                unrecognized.append("shift_end")
                warnings.append(f"{name} ({column}): unrecognized end time '{end.value}'")

            position, is_leadership = classify_position(joined)
            records.append(
                ShiftRecord(
                    employee_name=name,
                    shift_start=start.value,
                    shift_end=end.value,
                    department=classify_roster_department(joined),
                    day=day,
                    source_format=WEEKLY_ROSTER_FORMAT,
                    position=position,
                    is_leadership=is_leadership,
                    source_column=column,
                    unrecognized=tuple(unrecognized),
                    source_row=freeze_row(row),
                )
            )

    logger.info("Parsed %d shift(s) from %d roster row(s)", len(records), len(table))
    return records, warnings
