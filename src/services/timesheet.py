"""
Timesheet parsing and aggregation.

Reads a weekly timesheet CSV in a single forward pass, folds the well-formed
rows into per-employee and per-project hour totals, and derives the overtime
list and top project for the report.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from core.config import DEFAULT_OVERTIME_THRESHOLD, get_overtime_threshold
from core.errors import NoValidDataError
from core.validation import decode_line, parse_line, strip_line_terminator, truncate_hours, validate_header
from models.timesheet import BlankLine, MalformedLine, ProjectTotal, RunSummary, TimesheetRow


# =============================================================================
# AGGREGATION
# =============================================================================


class HoursAggregator:
    """
    Running hour totals keyed by employee and by project.

    Both mappings keep first-occurrence order, which is what makes the
    top-project tie-break reproducible.
    """

    def __init__(self):
        self._employee_hours: dict[str, int] = {}
        self._project_hours: dict[str, int] = {}
        self.valid_line_count = 0

    def add(self, row: TimesheetRow) -> None:
        hours = truncate_hours(row.hours_worked)
        self._employee_hours[row.employee_id] = self._employee_hours.get(row.employee_id, 0) + hours
        self._project_hours[row.project_name] = self._project_hours.get(row.project_name, 0) + hours
        self.valid_line_count += 1

    @property
    def employee_hours(self) -> Mapping[str, int]:
        return MappingProxyType(self._employee_hours)

    @property
    def project_hours(self) -> Mapping[str, int]:
        return MappingProxyType(self._project_hours)


@dataclass
class ParseResult:
    """Outcome of the parse/aggregate pass over one file."""

    aggregator: HoursAggregator
    malformed_lines: list[MalformedLine] = field(default_factory=list)
    blank_line_count: int = 0

    @property
    def valid_line_count(self) -> int:
        return self.aggregator.valid_line_count

    @property
    def malformed_line_count(self) -> int:
        return len(self.malformed_lines)

    @property
    def data_line_count(self) -> int:
        return self.valid_line_count + self.malformed_line_count + self.blank_line_count


# =============================================================================
# PARSING
# =============================================================================


def parse_timesheet(lines: Iterable[str]) -> ParseResult:
    """
    Validate the header and fold every data line into running totals.

    Args:
        lines: Raw lines including the header, with or without line terminators

    Returns:
        ParseResult with totals, malformed lines (in file order) and blank count

    Raises:
        HeaderMismatchError: if the first line is not the expected header
    """
    line_iter = iter(lines)
    header = strip_line_terminator(next(line_iter, ""))
    validate_header(header)

    result = ParseResult(aggregator=HoursAggregator())

    for line_number, raw_line in enumerate(line_iter, start=2):
        parsed = parse_line(strip_line_terminator(raw_line), line_number)
        if isinstance(parsed, TimesheetRow):
            result.aggregator.add(parsed)
        elif isinstance(parsed, MalformedLine):
            result.malformed_lines.append(parsed)
        elif isinstance(parsed, BlankLine):
            result.blank_line_count += 1

    return result


def parse_timesheet_file(input_file: Path) -> ParseResult:
    """
    Parse a timesheet CSV from disk (read once, line by line).

    Read in binary mode so only a line feed ends a line; a carriage return
    stays part of the line it is on. Each line is decoded on its own
    (see decode_line).
    """
    with input_file.open("rb") as f:
        return parse_timesheet(decode_line(raw_line) for raw_line in f)


# =============================================================================
# DERIVATION
# =============================================================================


def find_overtime_employees(employee_hours: Mapping[str, int], threshold: int = DEFAULT_OVERTIME_THRESHOLD) -> frozenset[str]:
    """Employees whose total is strictly above the threshold."""
    return frozenset(emp for emp, hours in employee_hours.items() if hours > threshold)


def find_top_project(project_hours: Mapping[str, int]) -> ProjectTotal | None:
    """
    Project with the most hours.

    Scans in mapping order and only replaces the leader on a strictly greater
    total, so the first project seen wins a tie.
    """
    top: ProjectTotal | None = None
    for name, hours in project_hours.items():
        if top is None or hours > top.hours:
            top = ProjectTotal(name=name, hours=hours)
    return top


def derive_summary(result: ParseResult, threshold: int | None = None) -> RunSummary:
    """
    Build the immutable run summary from the final totals.

    Args:
        result: Output of the parse/aggregate pass
        threshold: Overtime threshold; read from the environment when None

    Raises:
        NoValidDataError: if no well-formed rows were found
        ConfigError: if the threshold comes from an invalid environment setting
    """
    if threshold is None:
        threshold = get_overtime_threshold()

    employee_hours = dict(result.aggregator.employee_hours)
    project_hours = dict(result.aggregator.project_hours)

    if not employee_hours:
        raise NoValidDataError(result.malformed_line_count)

    return RunSummary(
        valid_line_count=result.valid_line_count,
        malformed_line_count=result.malformed_line_count,
        blank_line_count=result.blank_line_count,
        overtime_threshold=threshold,
        employee_hours=employee_hours,
        project_hours=project_hours,
        overtime_employees=find_overtime_employees(employee_hours, threshold),
        top_project=find_top_project(project_hours),
    )
