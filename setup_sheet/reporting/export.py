"""Excel export helpers for imported shifts."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
import xlsxwriter

from setup_sheet.config import (
    BOH,
    DEFAULT_AREA_COLUMN,
    DEFAULT_DAY_COLUMN,
    DEFAULT_END_COLUMN,
    DEFAULT_NAME_COLUMN,
    DEFAULT_START_COLUMN,
    FOH,
)
from setup_sheet.domain.models import ShiftRecord
from setup_sheet.reporting.stats import aggregate_department_counts, shift_hours

SHIFT_COLUMNS = [
    "Employee",
    "Day",
    "Start",
    "End",
    "Time Block",
    "Department",
    "Position",
    "Leadership",
    "Hours",
    "Source Format",
    "Source Column",
    "Needs Review",
]

# Rows written by "Download Template"
TEMPLATE_ROWS = [
    ["John Smith", "08:00", "16:00", "Front Counter", "Monday"],
    ["Jane Doe", "12:00", "20:00", "Drive Thru", "Tuesday"],
    ["Bob Johnson", "10:00", "18:00", "Kitchen", "Wednesday"],
    ["Sarah Williams", "09:00", "17:00", "Front Counter", "Thursday"],
]
TEMPLATE_COLUMNS = [
    DEFAULT_NAME_COLUMN,
    DEFAULT_START_COLUMN,
    DEFAULT_END_COLUMN,
    DEFAULT_AREA_COLUMN,
    DEFAULT_DAY_COLUMN,
]


def export_shifts_to_excel(records: List[ShiftRecord], warnings: List[str], output_path: Path) -> None:
    """Write committed shifts to a workbook with Shifts, Day Summary and Needs Review sheets."""
    shift_rows = []
    for record in records:
        hours = shift_hours(record)
        shift_rows.append(
            [
                record.employee_name,
                record.day.title() if record.day else "All days",
                record.shift_start,
                record.shift_end,
                record.time_block,
                record.department,
                record.position,
                "✓" if record.is_leadership else "",
                round(hours, 2) if hours is not None else "",
                record.source_format,
                record.source_column or "",
                ", ".join(record.unrecognized),
            ]
        )

    day_counts, employee_totals = aggregate_department_counts(records)
    day_rows = [
        [day.title(), counts[FOH], counts[BOH], counts[FOH] + counts[BOH]] for day, counts in day_counts.items()
    ]
    employee_rows = [
        [name, int(totals["shifts"]), round(totals["hours"], 2)] for name, totals in sorted(employee_totals.items())
    ]

    with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
        df_shifts = pd.DataFrame(shift_rows, columns=SHIFT_COLUMNS)
        df_shifts.to_excel(writer, sheet_name="Shifts", index=False)
        _autosize_columns(writer, "Shifts", df_shifts)
        _highlight_review_rows(writer, "Shifts", records)

        df_days = pd.DataFrame(day_rows, columns=["Day", FOH, BOH, "Total"])
        df_days.to_excel(writer, sheet_name="Day Summary", index=False)
        _autosize_columns(writer, "Day Summary", df_days)

        df_employees = pd.DataFrame(employee_rows, columns=["Employee", "Shifts", "Hours"])
        df_employees.to_excel(writer, sheet_name="Employee Summary", index=False)
        _autosize_columns(writer, "Employee Summary", df_employees)

        if warnings:
            df_review = pd.DataFrame([[w] for w in warnings], columns=["Warning"])
            df_review.to_excel(writer, sheet_name="Needs Review", index=False)
            _autosize_columns(writer, "Needs Review", df_review)


def _highlight_review_rows(writer: pd.ExcelWriter, sheet_name: str, records: List[ShiftRecord]) -> None:
    """Flag rows holding values that were passed through unnormalized."""
    worksheet = writer.sheets[sheet_name]
    review_fmt = writer.book.add_format({"bg_color": "#FFF2CC", "font_color": "#9C5700"})
    for idx, record in enumerate(records):
        if record.needs_review:
            # header occupies row 0
            worksheet.set_row(idx + 1, None, review_fmt)


def write_schedule_template(output_path: Path) -> None:
    """Write the sample column-format schedule users can fill in and upload."""
    workbook = xlsxwriter.Workbook(str(output_path))
    ws = workbook.add_worksheet("Schedule Template")

    header_fmt = workbook.add_format({
        "bold": True,
        "font_name": "Calibri",
        "bg_color": "#00AEEF",
        "align": "left",
        "border": 1,
    })
    cell_fmt = workbook.add_format({
        "font_name": "Calibri",
        "align": "left",
        "border": 1,
    })

    for col, header in enumerate(TEMPLATE_COLUMNS):
        width = max([len(header)] + [len(row[col]) for row in TEMPLATE_ROWS]) + 2
        ws.set_column(col, col, width)
        ws.write(0, col, header, header_fmt)
    for row_idx, row in enumerate(TEMPLATE_ROWS, start=1):
        for col, value in enumerate(row):
            # Keep times as text so they round-trip as "HH:MM"
            ws.write_string(row_idx, col, value, cell_fmt)

    workbook.close()


def _autosize_columns(writer: pd.ExcelWriter, sheet_name: str, dataframe: pd.DataFrame):
    worksheet = writer.sheets[sheet_name]
    for idx, column in enumerate(dataframe.columns):
        max_len = max([len(str(column))] + [len(str(cell)) for cell in dataframe[column]])
        worksheet.set_column(idx, idx, max_len + 2)
