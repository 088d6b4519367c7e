"""
Configuration constants and environment setup.
"""

import os
import re
from pathlib import Path

from dotenv import load_dotenv

from core.errors import ConfigError

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
OUTPUT_DIR = Path(os.environ.get("TIMESHEET_OUTPUT_DIR", PROJECT_ROOT / "output"))

# =============================================================================
# CSV FORMAT
# =============================================================================

EXPECTED_HEADER = "EmployeeID,Date,HoursWorked,ProjectName"
EXPECTED_FIELD_COUNT = 4
FIELD_DELIMITER = ","

# Unsigned decimal: digits, optionally followed by '.' and more digits
HOURS_PATTERN = r"[0-9]+(\.[0-9]+)?"

# Undecodable UTF-8 lines are read as Latin-1 instead
INPUT_ENCODING = "utf-8"
FALLBACK_ENCODING = "latin-1"

# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

DEFAULT_OVERTIME_THRESHOLD = 40
OVERTIME_THRESHOLD_ENV = "TIMESHEET_OVERTIME_THRESHOLD"

EMPLOYEE_COLUMN_WIDTH = 15
PROJECT_COLUMN_WIDTH = 25
HOURS_COLUMN_WIDTH = 10

REPORT_TITLE = "TIMESHEET SUMMARY REPORT"

EXCEL_EMPLOYEE_SHEET = "Employee Hours"
EXCEL_PROJECT_SHEET = "Projects"
EXCEL_SUMMARY_SHEET = "Run Summary"
EXCEL_EMPLOYEE_HEADERS = ["Employee ID", "Total Hours", "Overtime"]
EXCEL_PROJECT_HEADERS = ["Project Name", "Total Hours", "Top Project"]


def get_overtime_threshold() -> int:
    """
    Overtime threshold in whole hours, from the environment or the default.

    Raises:
        ConfigError: if TIMESHEET_OVERTIME_THRESHOLD is not a non-negative integer
    """
    raw = os.environ.get(OVERTIME_THRESHOLD_ENV, str(DEFAULT_OVERTIME_THRESHOLD))
    if not re.fullmatch(r"[0-9]+", raw.strip()):
        raise ConfigError(f"{OVERTIME_THRESHOLD_ENV} must be a non-negative integer, got '{raw}'")
    return int(raw)
