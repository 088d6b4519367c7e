"""
Report generation for text (terminal) and Excel formats.
"""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font

from core.config import (
    EMPLOYEE_COLUMN_WIDTH,
    EXCEL_EMPLOYEE_HEADERS,
    EXCEL_EMPLOYEE_SHEET,
    EXCEL_PROJECT_HEADERS,
    EXCEL_PROJECT_SHEET,
    EXCEL_SUMMARY_SHEET,
    HOURS_COLUMN_WIDTH,
    PROJECT_COLUMN_WIDTH,
    REPORT_TITLE,
)
from models.timesheet import RunSummary

BANNER = "=" * 42
SECTION_RULE = "━" * 40
EMPLOYEE_TABLE_RULE = "─" * 40
PROJECT_TABLE_RULE = "─" * 42


# =============================================================================
# TEXT REPORT
# =============================================================================


def format_employee_row(employee_id: str, hours: int) -> str:
    return f"{employee_id:<{EMPLOYEE_COLUMN_WIDTH}} | {hours:>{HOURS_COLUMN_WIDTH}d}"


def format_project_row(project_name: str, hours: int) -> str:
    return f"{project_name:<{PROJECT_COLUMN_WIDTH}} | {hours:>{HOURS_COLUMN_WIDTH}d}"


def section_header(title: str) -> list[str]:
    return [SECTION_RULE, f"  {title}", SECTION_RULE]


def employee_table(employee_hours: dict[str, int], employee_ids) -> list[str]:
    """Employee ID | Total Hours table for the given ids, sorted by id."""
    lines = [f"{'Employee ID':<{EMPLOYEE_COLUMN_WIDTH}} | Total Hours", EMPLOYEE_TABLE_RULE]
    lines.extend(format_employee_row(emp, employee_hours[emp]) for emp in sorted(employee_ids))
    return lines


def project_table_header() -> list[str]:
    return [f"{'Project Name':<{PROJECT_COLUMN_WIDTH}} | Total Hours", PROJECT_TABLE_RULE]


def format_summary_report(summary: RunSummary) -> list[str]:
    """
    Render the summary report as text lines.

    Sections:
    1. Total hours per employee (sorted by employee id)
    2. Employees over the overtime threshold (sorted by employee id)
    3. Project with the most hours
    4. Hours per project (sorted by project name)
    """
    threshold = summary.overtime_threshold
    lines = [BANNER, f"{REPORT_TITLE:^42}", BANNER, ""]

    # Section 1: Total hours per employee
    lines += section_header("TOTAL HOURS WORKED PER EMPLOYEE")
    lines += employee_table(summary.employee_hours, summary.employee_hours)
    lines.append("")

    # Section 2: Overtime
    lines += section_header(f"EMPLOYEES WORKING OVER {threshold} HOURS")
    if summary.overtime_employees:
        lines += employee_table(summary.employee_hours, summary.overtime_employees)
    else:
        lines.append(f"No employees worked more than {threshold} hours")
    lines.append("")

    # Section 3: Top project
    lines += section_header("PROJECT WITH MOST WORKING HOURS")
    if summary.top_project is not None:
        lines += project_table_header()
        lines.append(format_project_row(summary.top_project.name, summary.top_project.hours))
    else:
        lines.append("No project hours recorded")
    lines.append("")

    # Section 4: All projects
    lines += section_header("HOURS PER PROJECT")
    lines += project_table_header()
    lines.extend(
        format_project_row(project, summary.project_hours[project])
        for project in sorted(summary.project_hours)
    )
    lines += ["", BANNER, ""]

    return lines


# =============================================================================
# EXCEL REPORT
# =============================================================================


def write_header_row(ws, headers: list[str]):
    for col_idx, header in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = Font(bold=True)


def write_excel_employee_sheet(ws, summary: RunSummary):
    """Employee ID | Total Hours | Overtime, sorted by employee id."""
    write_header_row(ws, EXCEL_EMPLOYEE_HEADERS)

    for row_idx, emp in enumerate(sorted(summary.employee_hours), start=2):
        ws.cell(row=row_idx, column=1, value=emp)
        ws.cell(row=row_idx, column=2, value=summary.employee_hours[emp])
        ws.cell(row=row_idx, column=3, value="Yes" if emp in summary.overtime_employees else "")


def write_excel_project_sheet(ws, summary: RunSummary):
    """Project Name | Total Hours | Top Project, sorted by project name."""
    write_header_row(ws, EXCEL_PROJECT_HEADERS)

    top_name = summary.top_project.name if summary.top_project else None
    for row_idx, project in enumerate(sorted(summary.project_hours), start=2):
        ws.cell(row=row_idx, column=1, value=project)
        ws.cell(row=row_idx, column=2, value=summary.project_hours[project])
        ws.cell(row=row_idx, column=3, value="Yes" if project == top_name else "")


def write_excel_summary_sheet(ws, summary: RunSummary):
    """Two-column label/value sheet with the run counters."""
    rows = [
        ("Valid entries", summary.valid_line_count),
        ("Malformed lines", summary.malformed_line_count),
        ("Blank lines", summary.blank_line_count),
        ("Overtime threshold", summary.overtime_threshold),
        ("Overtime employees", len(summary.overtime_employees)),
        ("Top project", summary.top_project.name if summary.top_project else ""),
        ("Top project hours", summary.top_project.hours if summary.top_project else 0),
    ]
    for row_idx, (label, value) in enumerate(rows, start=1):
        ws.cell(row=row_idx, column=1, value=label).font = Font(bold=True)
        ws.cell(row=row_idx, column=2, value=value)


def create_excel_report(summary: RunSummary, output_path: Path) -> Path:
    """
    Create Excel summary workbook with three sheets.

    Sheet 1: "Employee Hours" - per-employee totals with overtime flag
    Sheet 2: "Projects" - per-project totals with top project flag
    Sheet 3: "Run Summary" - line counters and derived results
    """
    wb = Workbook()

    ws_employees = wb.active
    ws_employees.title = EXCEL_EMPLOYEE_SHEET
    write_excel_employee_sheet(ws_employees, summary)

    ws_projects = wb.create_sheet(title=EXCEL_PROJECT_SHEET)
    write_excel_project_sheet(ws_projects, summary)

    ws_summary = wb.create_sheet(title=EXCEL_SUMMARY_SHEET)
    write_excel_summary_sheet(ws_summary, summary)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(str(output_path))
    return output_path
