"""Centralized knobs for the schedule importer. Tweak values here instead of touching the parsers."""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# Calendar tables
# ---------------------------------------------------------------------------
DAY_IDS = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]

DAY_ABBREVIATIONS = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]

# Exact-match lookup. Insertion order matters for the prefix pass.
DAY_ALIASES: Dict[str, str] = {
    "sunday": "sunday",
    "monday": "monday",
    "tuesday": "tuesday",
    "wednesday": "wednesday",
    "thursday": "thursday",
    "friday": "friday",
    "saturday": "saturday",
    "mon": "monday",
    "m": "monday",
    "tues": "tuesday",
    "tue": "tuesday",
    "t": "tuesday",  # ambiguous with Thursday; resolves to Tuesday
    "wed": "wednesday",
    "w": "wednesday",
    "thurs": "thursday",
    "thu": "thursday",
    "th": "thursday",
    "fri": "friday",
    "f": "friday",
    "sat": "saturday",
    "s": "saturday",
    "sun": "sunday",
    "su": "sunday",
    "0": "sunday",
    "1": "monday",
    "2": "tuesday",
    "3": "wednesday",
    "4": "thursday",
    "5": "friday",
    "6": "saturday",
    "7": "sunday",
}

MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

# Dates from the roster exports the importer was first tuned against
KNOWN_ROSTER_DATES: Tuple[str, ...] = (
    "5/18/25",
    "5/19/25",
    "5/20/25",
    "5/21/25",
    "5/22/25",
    "5/23/25",
    "5/24/25",
)

# ---------------------------------------------------------------------------
# Department + position keywords
# ---------------------------------------------------------------------------
FOH = "FOH"
BOH = "BOH"
DEFAULT_DEPARTMENT = FOH

# BOH keywords are always checked first
BOH_AREA_KEYWORDS = ["kitchen", "prep", "cook", "grill", "back", "boh"]
FOH_AREA_KEYWORDS = ["front counter", "drive thru", "front", "cashier", "service", "dining room", "foh"]

ROSTER_BOH_KEYWORDS = ["back of house", "boh", "kitchen", "prep", "cook", "grill"]
ROSTER_FOH_KEYWORDS = ["front of house", "foh", "cashier", "front counter", "drive thru", "service"]

DEFAULT_POSITION = "Team Member"
POSITION_KEYWORDS: List[Tuple[str, str]] = [
    ("shift leader", "Shift Leader"),
    ("manager", "Manager"),
    ("general", "General"),
]
LEADERSHIP_KEYWORDS = ["leadership", "leader", "manager"]

# ---------------------------------------------------------------------------
# Column layouts
# ---------------------------------------------------------------------------
COLUMN_FORMAT = "column"
WEEKLY_ROSTER_FORMAT = "weekly-roster"

DEFAULT_NAME_COLUMN = "Employee Name"
DEFAULT_START_COLUMN = "Start Time"
DEFAULT_END_COLUMN = "End Time"
DEFAULT_AREA_COLUMN = "Area"
DEFAULT_DAY_COLUMN = "Day"

# Checked in priority order before falling back to the first column
ROSTER_NAME_HEADERS = ["Employee", "employee", "Name", "name", "Employee Name"]
NAME_HEADER_HINTS = ["employee", "name"]

PREVIEW_ROW_COUNT = 5  # Rows re-surfaced for confirmation before commit
FORMAT_SAMPLE_ROWS = 5  # Rows inspected for embedded shift-time text
SHIFT_TEXT_MARKERS = ["AM", "PM", ":"]

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
TIME_24H_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
TIME_12H_PATTERN = re.compile(r"^(1[0-2]|0?[1-9]):([0-5]\d)\s+(am|pm)$")
TIME_12H_SHORT_PATTERN = re.compile(r"^(1[0-2]|0?[1-9]):([0-5]\d)([ap])$")
TIME_HOUR_ONLY_PATTERN = re.compile(r"^(1[0-2]|0?[1-9])([ap])$")

SHIFT_RANGE_PATTERN = re.compile(
    r"(\d{1,2}:\d{2})(?:\s*(am|pm|a|p)\b)?\s*-\s*(\d{1,2}:\d{2})(?:\s*(am|pm|a|p)\b)?",
    re.IGNORECASE,
)

HEADER_DATE_PATTERN = re.compile(r"^\d{1,2}/\d{1,2}/(\d{2}|\d{4})$")
HEADER_DAY_DATE_PATTERN = re.compile(r"^[A-Za-z]+,\s*\d{1,2}/\d{1,2}/(\d{2}|\d{4})$")

PHONE_PATTERN = re.compile(r"\(?\d{3}\)?[\s.\-]?\d{3}[\s.\-]?\d{4}")
PHONE_FRAGMENT_PATTERN = re.compile(r"\d{3}\s*-\s*\d{4}")
PHONE_TAIL_PATTERN = re.compile(r"-\s*\d{4}\s*$")
ANNOTATION_PATTERNS = [
    re.compile(r"\[[^\[\]]*\]"),
    re.compile(r"\([^()]*\)"),
    re.compile(r"\{[^{}]*\}"),
]

MINUTES_PER_DAY = 1440
