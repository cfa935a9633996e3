"""Shared helpers for summarizing imported shifts."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from setup_sheet.config import BOH, DAY_IDS, FOH, TIME_24H_PATTERN
from setup_sheet.domain.models import ShiftRecord

ALL_DAYS = "all days"


def clock_to_minutes(value: str) -> Optional[int]:
    match = TIME_24H_PATTERN.match(value or "")
    if not match:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def shift_hours(record: ShiftRecord) -> Optional[float]:
    """Length of a shift in hours; overnight shifts wrap past midnight.

    Returns None when either end could not be normalized.
    """
    start = clock_to_minutes(record.shift_start)
    end = clock_to_minutes(record.shift_end)
    if start is None or end is None:
        return None
    minutes = end - start
    if minutes < 0:
        minutes += 24 * 60
    return minutes / 60


def day_order(records: Iterable[ShiftRecord]) -> List[str]:
    """Canonical days present in the records, Sunday first, then the undated bucket."""
    present = {record.day for record in records}
    ordered = [day for day in DAY_IDS if day in present]
    if None in present:
        ordered.append(ALL_DAYS)
    return ordered


def aggregate_department_counts(
    records: Iterable[ShiftRecord],
) -> Tuple[Dict[str, Dict[str, int]], Dict[str, Dict[str, float]]]:
    """
    Count shifts per day and department, and total hours per employee.

    Returns:
        day_counts: ``{day: {"FOH": n, "BOH": n}}``; undated shifts fall under ``"all days"``.
        employee_totals: ``{employee: {"shifts": n, "hours": h}}``. Shifts with an
            unrecognized time count toward ``shifts`` but not ``hours``.
    """
    records = list(records)
    day_counts: Dict[str, Dict[str, int]] = {day: {FOH: 0, BOH: 0} for day in day_order(records)}
    employee_totals: Dict[str, Dict[str, float]] = {}

    for record in records:
        day_key = record.day or ALL_DAYS
        day_counts[day_key][record.department] += 1

        totals = employee_totals.setdefault(record.employee_name, {"shifts": 0, "hours": 0.0})
        totals["shifts"] += 1
        hours = shift_hours(record)
        if hours is not None:
            totals["hours"] += hours

    return day_counts, employee_totals
