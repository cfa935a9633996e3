"""Parser for column-format schedules (one row per shift)."""

from __future__ import annotations

import logging
from typing import List, Tuple

from setup_sheet.config import COLUMN_FORMAT
from setup_sheet.domain.models import (
    ColumnMapping,
    RawTable,
    ShiftRecord,
    ValidationError,
    freeze_row,
    table_headers,
)
from setup_sheet.engine.normalizers import (
    classify_department,
    classify_position,
    is_blank,
    parse_day,
    parse_time,
    sanitize_name,
)

logger = logging.getLogger(__name__)


def missing_required_columns(table: RawTable, mapping: ColumnMapping) -> List[str]:
    headers = set(table_headers(table))
    return [column for column in mapping.required_columns() if column not in headers]


def has_day_column(table: RawTable, mapping: ColumnMapping) -> bool:
    return bool(mapping.day) and mapping.day in table_headers(table)


def parse_column_schedule(table: RawTable, mapping: ColumnMapping) -> Tuple[List[ShiftRecord], List[str]]:
    """Convert column-format rows into shift records.

    Returns ``(records, warnings)``. Rows whose sanitized name is empty are
    skipped; every other row produces exactly one record.

    Raises:
        ValidationError: If the name, start, end or area column is missing.
    """
    missing = missing_required_columns(table, mapping)
    if missing:
        raise ValidationError(f"Missing required columns: {', '.join(missing)}. Please check your file format.")

    warnings: List[str] = []
    with_day = has_day_column(table, mapping)
    if not with_day:
        warnings.append(
            f"The day column ({mapping.day or 'Day'}) is missing. Employees will be available for all days."
        )

    records: List[ShiftRecord] = []
    for index, row in enumerate(table):
        row_number = index + 1
        name = sanitize_name(row.get(mapping.name))
        if not name:
            logger.debug("Skipping row %d: no employee name", row_number)
            continue

        unrecognized: List[str] = []
        start = parse_time(row.get(mapping.start_time))
        end = parse_time(row.get(mapping.end_time))
        if not start.recognized:
            unrecognized.append("shift_start")
            warnings.append(f"Row {row_number}: unrecognized start time '{start.value}' for {name}")
        if not end.recognized:
            unrecognized.append("shift_end")
            warnings.append(f"Row {row_number}: unrecognized end time '{end.value}' for {name}")

        day = None
        if with_day and not is_blank(row.get(mapping.day)):
            outcome = parse_day(row.get(mapping.day))
            if outcome.recognized:
                day = outcome.value
            else:
                unrecognized.append("day")
                warnings.append(f"Row {row_number}: unrecognized day '{outcome.value}' for {name}")

        raw_area = row.get(mapping.area)
        position, is_leadership = classify_position(raw_area)
        records.append(
            ShiftRecord(
                employee_name=name,
                shift_start=start.value,
                shift_end=end.value,
                department=classify_department(raw_area),
                day=day,
                source_format=COLUMN_FORMAT,
                position=position,
                is_leadership=is_leadership,
                unrecognized=tuple(unrecognized),
                source_row=freeze_row(row),
            )
        )

    logger.info("Parsed %d shift(s) from %d column-format row(s)", len(records), len(table))
    return records, warnings
