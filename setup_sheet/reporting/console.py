"""Console output helpers for staged and committed imports."""

from __future__ import annotations

from typing import List

from setup_sheet.config import BOH, FOH
from setup_sheet.domain.models import PendingImport, ShiftRecord
from setup_sheet.reporting.stats import aggregate_department_counts


def _cell(value, width: int) -> str:
    text = "" if value is None else str(value).replace("\n", " | ")
    if len(text) > width - 2:
        text = text[: width - 5] + "..."
    return f"{text:<{width}}"


def print_preview(pending: PendingImport) -> None:
    """
    Show the first rows of the upload, the parsed shifts and any warnings.
    """
    result = pending.result

    print("\n" + "=" * 120)
    print(f"IMPORT PREVIEW ({result.source_format} layout)")
    print("=" * 120)

    print(f"\nShowing {len(pending.preview)} of {pending.row_count} uploaded rows:\n")
    if pending.preview:
        headers = list(pending.preview[0].keys())
        column_width = max(12, min(28, 120 // max(len(headers), 1)))
        print("".join(_cell(header, column_width) for header in headers))
        print("─" * (column_width * len(headers)))
        for row in pending.preview:
            print("".join(_cell(row.get(header), column_width) for header in headers))

    print(f"\n{'─' * 120}")
    print(f"PARSED SHIFTS ({len(result.records)})")
    print(f"{'─' * 120}")
    print_shifts(result.records)

    if result.warnings:
        print(f"\n{'─' * 120}")
        print(f"WARNINGS ({len(result.warnings)})")
        print(f"{'─' * 120}")
        for warning in result.warnings:
            print(f"  - {warning}")


def print_shifts(records: List[ShiftRecord]) -> None:
    print(f"\n{'Employee':<25}{'Day':<12}{'Time Block':<18}{'Dept':<6}{'Position':<16}{'Review'}")
    print("─" * 100)
    for record in records:
        review = ", ".join(record.unrecognized) if record.needs_review else ""
        print(
            f"{record.employee_name:<25}"
            f"{(record.day or '-'):<12}"
            f"{record.time_block:<18}"
            f"{record.department:<6}"
            f"{record.position:<16}"
            f"{review}"
        )


def print_import_summary(records: List[ShiftRecord]) -> None:
    day_counts, employee_totals = aggregate_department_counts(records)

    print(f"\n{'=' * 120}")
    print("SHIFTS BY DAY")
    print(f"{'=' * 120}\n")
    print(f"{'Day':<12}{FOH:<8}{BOH:<8}{'Total'}")
    print("─" * 40)
    for day, counts in day_counts.items():
        print(f"{day.title():<12}{counts[FOH]:<8}{counts[BOH]:<8}{counts[FOH] + counts[BOH]}")

    print(f"\n{'=' * 120}")
    print("EMPLOYEE SUMMARY")
    print(f"{'=' * 120}\n")
    print(f"{'Employee':<25}{'Shifts':<10}{'Hours'}")
    print("─" * 50)
    for name in sorted(employee_totals):
        totals = employee_totals[name]
        print(f"{name:<25}{int(totals['shifts']):<10}{totals['hours']:.1f}")
