"""
Tests for shared configuration tables.

Simple tests that verify the lookup tables stay consistent.
"""

from setup_sheet.config import (
    DAY_ABBREVIATIONS,
    DAY_ALIASES,
    DAY_IDS,
    DEFAULT_DEPARTMENT,
    KNOWN_ROSTER_DATES,
    SHIFT_RANGE_PATTERN,
    TIME_12H_PATTERN,
)


def test_day_ids_count():
    """Test that there are seven days, Sunday first."""
    assert len(DAY_IDS) == 7
    assert DAY_IDS[0] == "sunday"
    assert DAY_IDS[-1] == "saturday"


def test_aliases_resolve_to_day_ids():
    """Test that every alias maps to a canonical day."""
    for alias, day in DAY_ALIASES.items():
        assert alias == alias.lower()
        assert day in DAY_IDS


def test_abbreviations_cover_every_day():
    """Test that there is one three-letter abbreviation per day."""
    assert len(DAY_ABBREVIATIONS) == 7
    for abbreviation in DAY_ABBREVIATIONS:
        assert len(abbreviation) == 3


def test_known_roster_dates_span_one_week():
    """Test that the known roster dates cover a full week."""
    assert len(KNOWN_ROSTER_DATES) == 7


def test_unknown_areas_default_to_front_of_house():
    """Test that the fallback department is FOH."""
    assert DEFAULT_DEPARTMENT == "FOH"


def test_twelve_hour_pattern_requires_space():
    """Test that the 12-hour pattern needs a space before am/pm."""
    assert TIME_12H_PATTERN.match("2:00 pm")
    assert not TIME_12H_PATTERN.match("2:00pm")


def test_shift_range_pattern_captures_periods():
    """Test that the range pattern captures both clocks and periods."""
    match = SHIFT_RANGE_PATTERN.search("8:00 AM - 4:00 PM")
    assert match.groups() == ("8:00", "AM", "4:00", "PM")
