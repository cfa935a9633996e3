"""Command-line interface for the setup sheet schedule importer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from setup_sheet.config import (
    DEFAULT_AREA_COLUMN,
    DEFAULT_DAY_COLUMN,
    DEFAULT_END_COLUMN,
    DEFAULT_NAME_COLUMN,
    DEFAULT_START_COLUMN,
)
from setup_sheet.data_access.table_loader import PdfPassthrough, load_schedule_table
from setup_sheet.domain.models import ColumnMapping
from setup_sheet.engine.importer import ScheduleImport
from setup_sheet.reporting.console import print_import_summary, print_preview
from setup_sheet.reporting.export import export_shifts_to_excel, write_schedule_template


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Import a restaurant schedule export and normalize it into shift assignments."
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every normalization fallback (debug output).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser(
        "import",
        help="Parse a schedule export, preview it, and commit the normalized shifts.",
    )
    import_parser.add_argument(
        "schedule_file",
        type=Path,
        help="Schedule export (.xlsx, .xls or .csv). PDFs are passed through for server processing.",
    )
    import_parser.add_argument(
        "--name-column",
        default=DEFAULT_NAME_COLUMN,
        help=f"Header holding employee names (default: {DEFAULT_NAME_COLUMN}).",
    )
    import_parser.add_argument(
        "--start-column",
        default=DEFAULT_START_COLUMN,
        help=f"Header holding shift start times (default: {DEFAULT_START_COLUMN}).",
    )
    import_parser.add_argument(
        "--end-column",
        default=DEFAULT_END_COLUMN,
        help=f"Header holding shift end times (default: {DEFAULT_END_COLUMN}).",
    )
    import_parser.add_argument(
        "--area-column",
        default=DEFAULT_AREA_COLUMN,
        help=f"Header holding the area/position label (default: {DEFAULT_AREA_COLUMN}).",
    )
    import_parser.add_argument(
        "--day-column",
        default=DEFAULT_DAY_COLUMN,
        help=f"Header holding the shift day (default: {DEFAULT_DAY_COLUMN}).",
    )
    import_parser.add_argument(
        "--no-day-column",
        action="store_true",
        help="The sheet has no day column; every shift applies to all days.",
    )
    import_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write committed shifts to this Excel workbook.",
    )
    import_parser.add_argument(
        "--json",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write committed shifts as JSON records for the assignment grid.",
    )
    import_parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Commit without asking for confirmation after the preview.",
    )

    template_parser = subparsers.add_parser(
        "template",
        help="Write a sample column-format schedule to fill in.",
    )
    template_parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=Path("schedule-template.xlsx"),
        help="Destination path (default: schedule-template.xlsx).",
    )
    return parser


def _build_mapping(args: argparse.Namespace) -> ColumnMapping:
    return ColumnMapping(
        name=args.name_column.strip(),
        start_time=args.start_column.strip(),
        end_time=args.end_column.strip(),
        area=args.area_column.strip(),
        day=None if args.no_day_column else args.day_column.strip(),
    )


def _confirm(prompt: str) -> bool:
    answer = input(f"{prompt} [y/N] ").strip().lower()
    return answer in ("y", "yes")


def _with_xlsx_suffix(path: Path) -> Path:
    if not str(path).lower().endswith(".xlsx"):
        return path.with_name(path.name + ".xlsx")
    return path


def run_import(args: argparse.Namespace) -> None:
    loaded = load_schedule_table(args.schedule_file)
    if isinstance(loaded, PdfPassthrough):
        print(loaded.message)
        return

    session = ScheduleImport()
    pending = session.stage(loaded, _build_mapping(args))
    print_preview(pending)

    if not args.yes and not _confirm(f"\nImport {len(pending.records)} shift(s)?"):
        session.cancel()
        print("Import cancelled.")
        return

    records = session.confirm(pending)
    print_import_summary(records)

    if args.output is not None:
        output_path = _with_xlsx_suffix(args.output)
        export_shifts_to_excel(records, pending.warnings, output_path)
        print(f"\nWrote Excel to {output_path}")
    if args.json is not None:
        with args.json.open("w", encoding="utf-8") as f:
            json.dump([record.to_dict() for record in records], f, ensure_ascii=False, indent=2)
        print(f"Wrote JSON to {args.json}")

    print(f"\nImported {len(records)} shift(s) from schedule")


def run_template(args: argparse.Namespace) -> None:
    output_path = _with_xlsx_suffix(args.output)
    write_schedule_template(output_path)
    print(f"Wrote template to {output_path}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "import":
            run_import(args)
        elif args.command == "template":
            run_template(args)
    except Exception as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
