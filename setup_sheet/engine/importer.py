"""Import orchestration: detect the layout, validate, parse, stage for confirmation.

``import_schedule`` is the one-shot entry point. ``ScheduleImport`` wraps the
same pipeline in the upload -> preview -> confirm/cancel flow, handing a
``PendingImport`` to the caller instead of stashing the parsed rows anywhere.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from setup_sheet.config import COLUMN_FORMAT, PREVIEW_ROW_COUNT, WEEKLY_ROSTER_FORMAT
from setup_sheet.domain.models import (
    ColumnFormat,
    ColumnMapping,
    ImportResult,
    ImportState,
    PendingImport,
    RawTable,
    ShiftRecord,
    ValidationError,
    WeeklyRosterFormat,
    freeze_row,
)
from setup_sheet.engine.column_parser import parse_column_schedule
from setup_sheet.engine.detector import detect_layout, require_name_column
from setup_sheet.engine.roster_parser import parse_weekly_roster

logger = logging.getLogger(__name__)

EMPTY_TABLE_MESSAGE = "The uploaded file contains no data. Please check the file and try again."
NO_SHIFTS_MESSAGE = "No shifts could be read from the uploaded file. Please check your column mappings."


class ScheduleImport:
    """One upload's trip through Idle -> Detecting -> Validating -> Parsing -> Ready.

    ``stage`` returns a ``PendingImport``; pass it back to ``confirm`` to commit
    (Ready -> Committed) or call ``cancel`` to discard it. A validation failure
    at any step drops the session back to Idle and re-raises.
    """

    def __init__(self) -> None:
        self.state = ImportState.IDLE
        self._pending: Optional[PendingImport] = None

    def stage(self, table: RawTable, mapping: Optional[ColumnMapping] = None) -> PendingImport:
        mapping = mapping or ColumnMapping()
        self._pending = None
        try:
            self.state = ImportState.DETECTING
            if len(table) == 0:
                raise ValidationError(EMPTY_TABLE_MESSAGE)
            layout = detect_layout(table, mapping)
            logger.info("Detected %s layout", type(layout).__name__)

            self.state = ImportState.VALIDATING
            require_name_column(layout)

            self.state = ImportState.PARSING
            if isinstance(layout, ColumnFormat):
                records, warnings = parse_column_schedule(table, mapping)
                source_format = COLUMN_FORMAT
            elif isinstance(layout, WeeklyRosterFormat):
                records, warnings = parse_weekly_roster(table, layout)
                source_format = WEEKLY_ROSTER_FORMAT
            else:
                raise TypeError(f"Unknown table layout: {layout!r}")

            if not records:
                raise ValidationError(NO_SHIFTS_MESSAGE)
        except Exception:
            self.state = ImportState.IDLE
            raise

        if warnings:
            logger.warning("%d warning(s) raised during import", len(warnings))
        for warning in warnings:
            logger.debug(warning)

        self._pending = PendingImport(
            token=uuid.uuid4().hex,
            preview=tuple(freeze_row(row) for row in table[:PREVIEW_ROW_COUNT]),
            result=ImportResult(records=records, warnings=warnings, source_format=source_format),
            row_count=len(table),
        )
        self.state = ImportState.READY
        return self._pending

    def confirm(self, pending: PendingImport) -> List[ShiftRecord]:
        """Commit the staged import and hand its records to the caller."""
        if self.state is not ImportState.READY or self._pending is None:
            raise ValidationError("There is no staged import to confirm.")
        if pending.token != self._pending.token:
            raise ValidationError("This preview is out of date. Upload the file again.")
        self.state = ImportState.COMMITTED
        self._pending = None
        logger.info("Imported %d shift(s) from schedule", len(pending.records))
        return list(pending.records)

    def cancel(self) -> None:
        self._pending = None
        self.state = ImportState.IDLE


def import_schedule(table: RawTable, mapping: Optional[ColumnMapping] = None) -> ImportResult:
    """Detect, validate and parse a table in one call.

    Raises:
        ValidationError: For an empty table, missing required or employee-name
            columns, or when no shift could be parsed at all.
    """
    return ScheduleImport().stage(table, mapping).result
