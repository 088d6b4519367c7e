"""
Fatal error types for timesheet processing.

Malformed data lines are not errors: they are classified, counted and skipped
(see core.validation.parse_line). Everything here stops the run.
"""


class TimesheetError(ValueError):
    """Base class for fatal timesheet processing errors."""


class ConfigError(TimesheetError):
    """Environment setting that cannot be used."""


class EmptyFileError(TimesheetError):
    """Input file exists but contains no bytes."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"File '{path}' is empty")


class HeaderMismatchError(TimesheetError):
    """First line of the input is not the expected CSV header."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid CSV header: expected {expected!r}, found {actual!r}")


class NoValidDataError(TimesheetError):
    """Parsing finished without a single well-formed row."""

    def __init__(self, malformed_count: int = 0):
        self.malformed_count = malformed_count
        super().__init__("No valid data to process")
