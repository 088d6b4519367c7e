"""
Header validation and per-line classification.
"""

import re

from core.config import (
    EXPECTED_FIELD_COUNT,
    EXPECTED_HEADER,
    FALLBACK_ENCODING,
    FIELD_DELIMITER,
    HOURS_PATTERN,
    INPUT_ENCODING,
)
from core.errors import HeaderMismatchError
from models.timesheet import BlankLine, MalformedLine, ParsedLine, TimesheetRow

MISSING_FIELDS_REASON = "Missing fields"

_HOURS_RE = re.compile(HOURS_PATTERN)


def decode_line(raw: bytes) -> str:
    """Decode one raw line as UTF-8, or as Latin-1 when it is not valid UTF-8."""
    try:
        return raw.decode(INPUT_ENCODING)
    except UnicodeDecodeError:
        return raw.decode(FALLBACK_ENCODING)


def strip_line_terminator(line: str) -> str:
    """Remove a trailing newline, leaving any other whitespace (carriage returns included) untouched."""
    return line[:-1] if line.endswith("\n") else line


def validate_header(header: str, expected: str = EXPECTED_HEADER) -> None:
    """
    Check the first line of the file against the expected header.

    The comparison is exact: casing, column order and trailing whitespace
    all count.

    Raises:
        HeaderMismatchError: if the header differs in any way
    """
    if header != expected:
        raise HeaderMismatchError(expected, header)


def is_valid_hours(value: str) -> bool:
    """Check hours is an unsigned decimal like '8' or '7.5'."""
    return _HOURS_RE.fullmatch(value) is not None


def truncate_hours(value: str) -> int:
    """Integer part of an hours string; '7.9' -> 7 (fraction dropped, not rounded)."""
    return int(value.split(".", 1)[0])


def split_fields(line: str) -> list[str]:
    """
    Split a data line into exactly four positional fields.

    Extra delimiters stay in the last field; missing fields come back empty.
    """
    fields = line.split(FIELD_DELIMITER, EXPECTED_FIELD_COUNT - 1)
    return fields + [""] * (EXPECTED_FIELD_COUNT - len(fields))


def parse_line(line: str, line_number: int) -> ParsedLine:
    """
    Classify one data line (the header is line 1).

    Returns:
        BlankLine for whitespace-only lines, MalformedLine with a reason
        for lines with empty fields or a bad hours value, TimesheetRow otherwise
    """
    if not line.strip():
        return BlankLine(line_number)

    employee_id, work_date, hours, project = split_fields(line)

    if not (employee_id and work_date and hours and project):
        return MalformedLine(line_number, MISSING_FIELDS_REASON, line)

    if not is_valid_hours(hours):
        return MalformedLine(line_number, f"Invalid hours value '{hours}'", line)

    return TimesheetRow(
        line_number=line_number,
        employee_id=employee_id,
        date=work_date,
        hours_worked=hours,
        project_name=project,
    )
