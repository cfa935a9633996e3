"""
Tests for FOH/BOH classification and position extraction.
"""

from setup_sheet.engine.normalizers import (
    classify_department,
    classify_position,
    classify_roster_department,
)


def test_literal_tags_fast_path():
    """Test that FOH and BOH tags pass straight through."""
    assert classify_department("FOH") == "FOH"
    assert classify_department("BOH") == "BOH"


def test_lowercase_tags():
    """Test that lowercase tags are recognized."""
    assert classify_department(" boh ") == "BOH"
    assert classify_department("foh") == "FOH"


def test_kitchen_keywords_are_boh():
    """Test that kitchen areas classify as BOH."""
    assert classify_department("Kitchen Prep") == "BOH"
    assert classify_department("Grill") == "BOH"
    assert classify_department("Backline") == "BOH"


def test_front_keywords_are_foh():
    """Test that front areas classify as FOH."""
    assert classify_department("Drive Thru") == "FOH"
    assert classify_department("Front Counter") == "FOH"
    assert classify_department("Dining Room") == "FOH"


def test_boh_keywords_win_over_foh():
    """Kitchen-adjacent terms are more specific, so they are checked first."""
    assert classify_department("Front / Back") == "BOH"
    assert classify_department("Service Kitchen") == "BOH"


def test_unknown_areas_default_to_foh():
    """Test that unknown areas fall back to FOH."""
    assert classify_department("") == "FOH"
    assert classify_department(None) == "FOH"
    assert classify_department("Mystery Station") == "FOH"
    assert classify_department(42) == "FOH"


def test_classifier_is_total():
    """Test that odd inputs always get a department."""
    samples = ["", "x", "BOH", "Cook", "Cashier", "??", "Front of House", "prep cook"]
    for sample in samples:
        assert classify_department(sample) in ("FOH", "BOH")


def test_roster_cell_keywords():
    """Test that roster cell text is classified by its keywords."""
    assert classify_roster_department("8:00 AM - 4:00 PM Kitchen") == "BOH"
    assert classify_roster_department("Back of House - Cashier") == "BOH"
    assert classify_roster_department("Front of House") == "FOH"
    assert classify_roster_department("Leadership | FOH - Shift Leader") == "FOH"
    assert classify_roster_department("") == "FOH"


def test_position_extraction():
    """Test that positions and leadership come from the label."""
    assert classify_position("Leadership | FOH - Shift Leader") == ("Shift Leader", True)
    assert classify_position("Manager") == ("Manager", True)
    assert classify_position("General Cook") == ("General", False)
    assert classify_position("Kitchen") == ("Team Member", False)
    assert classify_position(None) == ("Team Member", False)
