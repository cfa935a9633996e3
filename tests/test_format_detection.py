"""
Tests for column-schedule vs weekly-roster layout detection.
"""

import pytest

from setup_sheet.domain.models import (
    ColumnFormat,
    ColumnMapping,
    ValidationError,
    WeeklyRosterFormat,
)
from setup_sheet.engine.detector import (
    detect_format,
    detect_layout,
    find_name_column,
    require_name_column,
)

TEMPLATE_HEADERS = ["Employee Name", "Start Time", "End Time", "Area", "Day"]


def _row(values):
    return dict(zip(TEMPLATE_HEADERS, values))


def test_day_date_header_is_roster():
    """Test that a "Sun, 5/18/25" header means a weekly roster."""
    table = [{"Employee": "Bob", "Sun, 5/18/25": "8:00 AM - 4:00 PM"}]
    assert detect_format(table) == "weekly-roster"


def test_template_headers_are_column_format():
    """Test that the template headers mean column format."""
    table = [_row(["John Smith", "08:00", "16:00", "Front Counter", "Monday"])]
    assert detect_format(table) == "column"


def test_times_in_mapped_columns_do_not_trigger_roster():
    """Test that times in mapped columns keep column format."""
    table = [
        _row(["John Smith", "8:00 AM", "4:00 PM", "Front Counter", "Monday"]),
        _row(["Jane Doe", "12:00 PM", "8:00 PM", "Drive Thru", "Tuesday"]),
    ]
    assert detect_format(table) == "column"
    assert detect_format(table, ColumnMapping()) == "column"


def test_day_name_header():
    """Test that a bare day-name header means a weekly roster."""
    assert detect_format([{"Name": "Al", "Monday": "9-5"}]) == "weekly-roster"
    assert detect_format([{"Name": "Al", "tue": "9-5"}]) == "weekly-roster"


def test_bare_date_header():
    """Test that a date header means a weekly roster."""
    assert detect_format([{"Name": "Al", "5/19/2025": ""}]) == "weekly-roster"
    assert detect_format([{"Name": "Al", "5/19/25": ""}]) == "weekly-roster"


def test_month_name_header():
    """Test that a header naming a month means a weekly roster."""
    assert detect_format([{"Name": "Al", "Week of June 2": ""}]) == "weekly-roster"


def test_header_starting_with_day_abbreviation():
    """Test that a header starting with a day abbreviation means a weekly roster."""
    assert detect_format([{"Name": "Al", "Wed 5/21": ""}]) == "weekly-roster"


def test_shift_text_in_unmapped_cells_needs_more_than_one_row():
    """Test that shift text in cells only counts with more than one row."""
    one_row = [{"Staff": "Al", "Shift": "9:00 AM - 5:00 PM"}]
    two_rows = one_row + [{"Staff": "Bea", "Shift": "10:00 AM - 6:00 PM"}]
    assert detect_format(one_row) == "column"
    assert detect_format(two_rows) == "weekly-roster"


def test_detect_layout_returns_tagged_variants():
    """Test that detect_layout returns the matching layout type."""
    roster = detect_layout([{"Employee": "Bob", "Mon, 5/19/25": "", "Notes": ""}])
    assert isinstance(roster, WeeklyRosterFormat)
    assert roster.name_column == "Employee"
    assert roster.day_columns == ("Mon, 5/19/25",)

    column = detect_layout([_row(["John", "08:00", "16:00", "Kitchen", "Mon"])])
    assert isinstance(column, ColumnFormat)
    assert column.headers == tuple(TEMPLATE_HEADERS)


def test_find_name_column_priority_and_fallback():
    """Test that known name headers win over the first column."""
    assert find_name_column(["Sun, 5/18/25", "Name", "Employee"]) == "Employee"
    assert find_name_column(["Team Member", "Sun, 5/18/25"]) == "Team Member"
    assert find_name_column(["Sun, 5/18/25", "Mon, 5/19/25"]) is None
    assert find_name_column([]) is None


def test_column_format_requires_name_column():
    """Test that a column table without a name header is rejected."""
    with pytest.raises(ValidationError, match="employee name"):
        require_name_column(ColumnFormat(headers=("Who", "Start Time", "End Time", "Area")))


def test_roster_requires_name_column():
    """Test that a roster without a name column is rejected."""
    layout = WeeklyRosterFormat(headers=("Sun, 5/18/25",), name_column=None, day_columns=("Sun, 5/18/25",))
    with pytest.raises(ValidationError):
        require_name_column(layout)
