"""
Colored status output for the command line.

Report text goes to stdout; errors and warnings go to stderr. Markup and
highlighting are off so CSV values are printed exactly as read.
"""

from rich.console import Console

stdout_console = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)
stderr_console = Console(stderr=True, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(message: str) -> None:
    stderr_console.print(f"ERROR: {message}", style="red")


def print_warning(message: str) -> None:
    stderr_console.print(f"WARNING: {message}", style="bold yellow")


def print_success(message: str) -> None:
    stdout_console.print(message, style="green")


def print_info(message: str) -> None:
    stdout_console.print(message, style="blue")


def print_plain(message: str = "", err: bool = False) -> None:
    """Uncolored line, e.g. report tables or expected/found details."""
    (stderr_console if err else stdout_console).print(message)
