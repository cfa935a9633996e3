"""
Tests for shift summaries, console output and Excel export.
"""

import pandas as pd

from setup_sheet.domain.models import ShiftRecord
from setup_sheet.engine.importer import ScheduleImport
from setup_sheet.reporting.console import print_import_summary, print_preview
from setup_sheet.reporting.export import export_shifts_to_excel
from setup_sheet.reporting.stats import aggregate_department_counts, day_order, shift_hours


def _record(name, start, end, department="FOH", day="monday", unrecognized=()):
    return ShiftRecord(
        employee_name=name,
        shift_start=start,
        shift_end=end,
        department=department,
        day=day,
        source_format="column",
        unrecognized=unrecognized,
    )


RECORDS = [
    _record("Al", "08:00", "16:00", "FOH", "monday"),
    _record("Al", "22:00", "06:00", "BOH", "friday"),
    _record("Bea", "10:00", "14:30", "BOH", "monday"),
    _record("Cy", "noonish", "16:00", "FOH", None, unrecognized=("shift_start",)),
]


def test_shift_hours():
    """Test that shift length is measured in hours."""
    assert shift_hours(RECORDS[0]) == 8.0
    assert shift_hours(RECORDS[2]) == 4.5


def test_overnight_shift_wraps():
    """Test that overnight shifts wrap past midnight."""
    assert shift_hours(RECORDS[1]) == 8.0


def test_unrecognized_time_has_no_hours():
    """Test that unreadable times have no length."""
    assert shift_hours(RECORDS[3]) is None


def test_day_order_puts_undated_last():
    """Test that undated shifts sort after the days of the week."""
    assert day_order(RECORDS) == ["monday", "friday", "all days"]


def test_aggregate_department_counts():
    """Test the per-day department counts and per-employee totals."""
    day_counts, employee_totals = aggregate_department_counts(RECORDS)
    assert day_counts["monday"] == {"FOH": 1, "BOH": 1}
    assert day_counts["friday"] == {"FOH": 0, "BOH": 1}
    assert day_counts["all days"] == {"FOH": 1, "BOH": 0}
    assert employee_totals["Al"] == {"shifts": 2, "hours": 16.0}
    assert employee_totals["Cy"] == {"shifts": 1, "hours": 0.0}


def test_export_writes_expected_sheets(tmp_path):
    """Test that the export writes every summary sheet."""
    path = tmp_path / "shifts.xlsx"
    export_shifts_to_excel(RECORDS, ["Row 4: unrecognized start time 'noonish'"], path)

    sheets = pd.read_excel(path, sheet_name=None)
    assert list(sheets) == ["Shifts", "Day Summary", "Employee Summary", "Needs Review"]
    shifts = sheets["Shifts"]
    assert list(shifts["Employee"]) == ["Al", "Al", "Bea", "Cy"]
    assert shifts.loc[3, "Day"] == "All days"
    assert shifts.loc[3, "Needs Review"] == "shift_start"
    assert list(sheets["Day Summary"]["Total"]) == [2, 1, 1]


def test_export_without_warnings_skips_review_sheet(tmp_path):
    """Test that the review sheet is omitted when there are no warnings."""
    path = tmp_path / "shifts.xlsx"
    export_shifts_to_excel(RECORDS[:3], [], path)
    assert "Needs Review" not in pd.ExcelFile(path).sheet_names


def test_print_preview(capsys):
    """Test that the preview shows rows, shifts and warnings."""
    table = [
        {"Employee Name": "Jane Doe", "Start Time": "12:00 PM", "End Time": "8:00 PM", "Area": "Drive Thru", "Day": "Tue"},
        {"Employee Name": "Sam", "Start Time": "later", "End Time": "8:00 PM", "Area": "Kitchen", "Day": "Wed"},
    ]
    pending = ScheduleImport().stage(table)
    print_preview(pending)
    out = capsys.readouterr().out
    assert "IMPORT PREVIEW (column layout)" in out
    assert "Showing 2 of 2 uploaded rows" in out
    assert "PARSED SHIFTS (2)" in out
    assert "WARNINGS (1)" in out
    assert "later" in out


def test_print_import_summary(capsys):
    """Test that the summary shows day and employee tables."""
    print_import_summary(RECORDS)
    out = capsys.readouterr().out
    assert "SHIFTS BY DAY" in out
    assert "EMPLOYEE SUMMARY" in out
    assert "Monday" in out
    assert "16.0" in out
