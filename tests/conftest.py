"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src and tests to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

HEADER = "EmployeeID,Date,HoursWorked,ProjectName"


@pytest.fixture
def header():
    return HEADER


@pytest.fixture
def sample_lines():
    """Small week with one malformed line per reason and a blank line."""
    return [
        HEADER,
        "E1,2024-01-01,20,Alpha",
        "E1,2024-01-02,25,Alpha",
        "E2,2024-01-01,abc,Beta",
        "",
        ",2024-01-01,8,Gamma",
        "E3,2024-01-03,7.9,Beta",
        "E3,2024-01-04,3,Beta",
    ]


@pytest.fixture
def write_csv(tmp_path):
    """Factory writing lines to a CSV file in tmp_path and returning its path."""

    def _write(lines: list[str], name: str = "timesheet.csv", trailing_newline: bool = True) -> Path:
        path = tmp_path / name
        text = "\n".join(lines)
        if trailing_newline:
            text += "\n"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
