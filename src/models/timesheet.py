"""
Data models for timesheet rows and run summaries.

Parsed lines are small frozen dataclasses (one per classification);
the final summary is a Pydantic model so it can be dumped as-is.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class TimesheetRow:
    """Well-formed data line."""

    line_number: int
    employee_id: str
    date: str
    hours_worked: str  # raw decimal string, e.g. "7.5"
    project_name: str


@dataclass(frozen=True)
class MalformedLine:
    """Non-blank data line that failed validation."""

    line_number: int
    reason: str
    raw: str


@dataclass(frozen=True)
class BlankLine:
    """Whitespace-only data line, ignored by every counter except its own."""

    line_number: int


ParsedLine = TimesheetRow | MalformedLine | BlankLine


class ProjectTotal(BaseModel):
    """Project name with its accumulated hours."""

    model_config = ConfigDict(frozen=True)

    name: str
    hours: int


class RunSummary(BaseModel):
    """Everything the reporters need after a successful run."""

    model_config = ConfigDict(frozen=True)

    valid_line_count: int
    malformed_line_count: int
    blank_line_count: int
    overtime_threshold: int
    employee_hours: dict[str, int]
    project_hours: dict[str, int]
    overtime_employees: frozenset[str]
    top_project: ProjectTotal | None = None
