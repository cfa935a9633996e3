"""Cell-level normalization: times, days, employee names and departments.

Every function here is pure and total. Values that cannot be recognized are
passed through raw (see ``Unrecognized``) instead of raising, so the caller can
surface them for manual correction before the import is committed.
"""

from __future__ import annotations

import logging
import math
import numbers
from datetime import date, datetime, time
from typing import Any, Optional, Tuple

from setup_sheet.config import (
    ANNOTATION_PATTERNS,
    BOH,
    BOH_AREA_KEYWORDS,
    DAY_ALIASES,
    DAY_IDS,
    DEFAULT_DEPARTMENT,
    DEFAULT_POSITION,
    FOH,
    FOH_AREA_KEYWORDS,
    LEADERSHIP_KEYWORDS,
    MINUTES_PER_DAY,
    PHONE_FRAGMENT_PATTERN,
    PHONE_PATTERN,
    PHONE_TAIL_PATTERN,
    POSITION_KEYWORDS,
    ROSTER_BOH_KEYWORDS,
    ROSTER_FOH_KEYWORDS,
    TIME_12H_PATTERN,
    TIME_12H_SHORT_PATTERN,
    TIME_24H_PATTERN,
    TIME_HOUR_ONLY_PATTERN,
)
from setup_sheet.domain.models import ParseOutcome, Parsed, Unrecognized

logger = logging.getLogger(__name__)

MIDNIGHT = "00:00"


def is_blank(value: Any) -> bool:
    """True for None, NaN and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _format_clock(hours: int, minutes: int) -> str:
    return f"{hours:02d}:{minutes:02d}"


def _to_24_hour(hour: int, is_pm: bool) -> int:
    if is_pm and hour < 12:
        return hour + 12
    if not is_pm and hour == 12:
        return 0
    return hour


def _as_number(value: Any) -> Optional[float]:
    """Return the value as a finite float if it is (or fully parses as) a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def serial_to_clock(serial: float) -> str:
    """Convert an Excel fractional-day serial (0.5 == noon) to ``HH:MM``."""
    # Whole days carry no clock information
    total_minutes = math.floor((serial % 1) * MINUTES_PER_DAY + 0.5)
    return _format_clock((total_minutes // 60) % 24, total_minutes % 60)


def parse_time(raw: Any) -> ParseOutcome:
    """Normalize one raw time cell to a 24-hour ``HH:MM`` string.

    Numbers (and strings that are entirely a number) are read as Excel serial
    fractions of a day before any text pattern is tried. Text is matched
    against 24-hour, ``H:MM am``, ``H:MMa`` and ``Ha`` forms in that order.
    """
    if is_blank(raw):
        return Parsed(MIDNIGHT)

    if isinstance(raw, datetime):
        return Parsed(_format_clock(raw.hour, raw.minute))
    if isinstance(raw, time):
        return Parsed(_format_clock(raw.hour, raw.minute))

    serial = _as_number(raw)
    if serial is not None and math.isfinite(serial * MINUTES_PER_DAY):
        return Parsed(serial_to_clock(serial))

    text = str(raw).strip()
    clean = text.lower()

    match = TIME_24H_PATTERN.match(clean)
    if match:
        return Parsed(_format_clock(int(match.group(1)), int(match.group(2))))

    match = TIME_12H_PATTERN.match(clean)
    if match:
        hour = _to_24_hour(int(match.group(1)), match.group(3) == "pm")
        return Parsed(_format_clock(hour, int(match.group(2))))

    match = TIME_12H_SHORT_PATTERN.match(clean)
    if match:
        hour = _to_24_hour(int(match.group(1)), match.group(3) == "p")
        return Parsed(_format_clock(hour, int(match.group(2))))

    match = TIME_HOUR_ONLY_PATTERN.match(clean)
    if match:
        hour = _to_24_hour(int(match.group(1)), match.group(2) == "p")
        return Parsed(_format_clock(hour, 0))

    logger.debug("Unrecognized time format: %r", raw)
    return Unrecognized(text)


def normalize_time(raw: Any) -> str:
    return parse_time(raw).value


def _day_token(raw: Any) -> str:
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    return str(raw).strip().lower()


def parse_day(raw: Any) -> ParseOutcome:
    """Map a raw day token to a lowercase day id.

    Blank input is ``Parsed(None)`` (no day given). A non-blank token that
    cannot be resolved is ``Unrecognized`` so it can be flagged for review.
    """
    if is_blank(raw):
        return Parsed(None)
    if isinstance(raw, (date, datetime)):
        # Python weekday(): Monday == 0
        return Parsed(DAY_IDS[(raw.weekday() + 1) % 7])

    token = _day_token(raw)

    if token in DAY_ALIASES:
        return Parsed(DAY_ALIASES[token])

    for alias, day in DAY_ALIASES.items():
        if len(alias) > 1 and not alias.isdigit() and token.startswith(alias):
            return Parsed(day)

    for day in DAY_IDS:
        if day in token:
            return Parsed(day)

    logger.debug("Unrecognized day token: %r", raw)
    return Unrecognized(str(raw).strip())


def normalize_day(raw: Any) -> Optional[str]:
    """Return a canonical day id, or None when the token is blank or unknown."""
    outcome = parse_day(raw)
    return outcome.value if outcome.recognized else None


def _strip_once(text: str) -> str:
    text = PHONE_PATTERN.sub(" ", text)
    text = PHONE_FRAGMENT_PATTERN.sub(" ", text)
    text = PHONE_TAIL_PATTERN.sub(" ", text)
    for pattern in ANNOTATION_PATTERNS:
        text = pattern.sub(" ", text)
    return " ".join(text.split())


def sanitize_name(raw: Any) -> str:
    """Strip phone numbers and bracketed notes from an employee name.

    Passes repeat until nothing changes, so sanitizing twice is a no-op.
    """
    if is_blank(raw):
        return ""
    current = " ".join(str(raw).split())
    while True:
        cleaned = _strip_once(current)
        if cleaned == current:
            return cleaned
        current = cleaned


def _match_keywords(text: str, boh_keywords, foh_keywords) -> Optional[str]:
    if any(keyword in text for keyword in boh_keywords):
        return BOH
    if any(keyword in text for keyword in foh_keywords):
        return FOH
    return None


def classify_department(raw: Any) -> str:
    """Map a free-text area label to FOH or BOH. Unknown areas are FOH."""
    if is_blank(raw):
        return DEFAULT_DEPARTMENT
    if raw == BOH or raw == FOH:
        return raw

    area = str(raw).lower().strip()
    if area == "boh":
        return BOH
    if area == "foh":
        return FOH

    department = _match_keywords(area, BOH_AREA_KEYWORDS, FOH_AREA_KEYWORDS)
    if department is None:
        logger.debug("Could not determine area from %r; defaulting to %s", raw, DEFAULT_DEPARTMENT)
        return DEFAULT_DEPARTMENT
    return department


def classify_roster_department(text: str) -> str:
    """Classify a whole roster cell (all of its lines) by department keywords."""
    department = _match_keywords(str(text or "").lower(), ROSTER_BOH_KEYWORDS, ROSTER_FOH_KEYWORDS)
    return department or DEFAULT_DEPARTMENT


def classify_position(raw: Any) -> Tuple[str, bool]:
    """Return ``(position, is_leadership)`` for labels like "Leadership | FOH - Shift Leader"."""
    if is_blank(raw):
        return DEFAULT_POSITION, False
    text = str(raw).lower()
    position = DEFAULT_POSITION
    for keyword, label in POSITION_KEYWORDS:
        if keyword in text:
            position = label
            break
    is_leadership = any(keyword in text for keyword in LEADERSHIP_KEYWORDS)
    return position, is_leadership
