#!/usr/bin/env python3
"""
Process an employee timesheet CSV and print a weekly summary report.

Validates the CSV header, skips and reports malformed lines, totals hours per
employee and per project, flags overtime, and prints the report tables.

Usage:
    uv run python src/scripts/process_timesheet.py data/timesheet_sample.csv
    uv run python src/scripts/process_timesheet.py data/timesheet_sample.csv --excel summary.xlsx
"""

import argparse
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DEFAULT_OVERTIME_THRESHOLD, EXPECTED_HEADER, OUTPUT_DIR, get_overtime_threshold
from core.errors import ConfigError, EmptyFileError, HeaderMismatchError, NoValidDataError
from services.console import print_error, print_info, print_plain, print_success, print_warning
from services.reports import create_excel_report, format_summary_report
from services.timesheet import derive_summary, parse_timesheet_file

DESCRIPTION = f"""\
Processes employee timesheet data from a CSV file and generates a summary report.

The CSV file must have the following header:
    {EXPECTED_HEADER}

The script will:
- Calculate total hours worked per employee
- Identify employees who worked more than the overtime threshold
  (default {DEFAULT_OVERTIME_THRESHOLD}, set TIMESHEET_OVERTIME_THRESHOLD to change it)
- Determine which project received the most working hours
- Handle and report malformed lines
- Display results in a formatted table
"""

EPILOG = """\
examples:
    %(prog)s data/timesheet_sample.csv
    %(prog)s /path/to/timesheet.csv

exit codes:
    0 - Success
    1 - Error (missing file, invalid data, etc.)
"""


# =============================================================================
# INPUT CHECKS
# =============================================================================


def check_input_file(input_file: Path) -> None:
    """
    Make sure the input is an existing, readable, non-empty regular file.

    Raises:
        FileNotFoundError: path missing or not a regular file
        PermissionError: file not readable by this process
        EmptyFileError: file has zero bytes
    """
    if not input_file.is_file():
        raise FileNotFoundError(f"File '{input_file}' does not exist")
    if not os.access(input_file, os.R_OK):
        raise PermissionError(f"File '{input_file}' is not readable")
    if input_file.stat().st_size == 0:
        raise EmptyFileError(input_file)


def resolve_excel_path(excel_arg: str) -> Path:
    """Bare filenames go to OUTPUT_DIR; anything with a directory is used as given."""
    path = Path(excel_arg)
    if not path.is_absolute() and path.parent == Path("."):
        return OUTPUT_DIR / path
    return path


# =============================================================================
# MAIN
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="process-timesheet",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to the timesheet CSV file",
    )
    parser.add_argument(
        "--excel",
        metavar="PATH",
        help=f"Also write the summary to an Excel workbook (bare filenames go to {OUTPUT_DIR})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input_file:
        print_error("No input file specified")
        print_plain(f"Usage: {parser.prog} <timesheet.csv>", err=True)
        print_plain(f"For more information, use: {parser.prog} --help", err=True)
        return 1

    # 1. Configuration
    try:
        threshold = get_overtime_threshold()
    except ConfigError as e:
        print_error(str(e))
        return 1

    input_file = Path(args.input_file)

    # 2. File guards
    try:
        check_input_file(input_file)
    except (FileNotFoundError, PermissionError, EmptyFileError) as e:
        print_error(str(e))
        return 1

    print_info(f"Processing timesheet file: {input_file}")
    print_plain()

    # 3. Header validation + parse/aggregate pass
    try:
        result = parse_timesheet_file(input_file)
    except HeaderMismatchError as e:
        print_error("Invalid CSV header")
        print_plain(f"Expected: {e.expected}", err=True)
        print_plain(f"Found:    {e.actual}", err=True)
        return 1

    print_success("CSV header validation passed")
    print_plain()

    # 4. Malformed line warnings
    for malformed in result.malformed_lines:
        print_warning(f"Malformed line {malformed.line_number}: {malformed.reason}")

    if result.malformed_line_count:
        print_warning(f"Encountered {result.malformed_line_count} malformed line(s)")
    else:
        print_success("No malformed lines found")

    print_plain()
    print_info(f"Processed {result.valid_line_count} valid timesheet entries")
    print_plain()

    # 5. Derive summary
    try:
        summary = derive_summary(result, threshold)
    except NoValidDataError as e:
        print_error(str(e))
        return 1

    # 6. Report
    for line in format_summary_report(summary):
        print_plain(line)

    if args.excel:
        excel_path = create_excel_report(summary, resolve_excel_path(args.excel))
        print_info(f"Saved Excel report to: {excel_path}")

    print_success("Report generation completed successfully")
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
