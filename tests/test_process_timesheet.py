"""
End-to-end tests for the process-timesheet command.
"""

import os

import pytest

from scripts.process_timesheet import check_input_file, main, resolve_excel_path
from core.config import OUTPUT_DIR
from core.errors import EmptyFileError


class TestCheckInputFile:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            check_input_file(tmp_path / "missing.csv")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            check_input_file(tmp_path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.touch()
        with pytest.raises(EmptyFileError):
            check_input_file(path)

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="root can read anything")
    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "locked.csv"
        path.write_text("x\n")
        path.chmod(0)
        try:
            with pytest.raises(PermissionError):
                check_input_file(path)
        finally:
            path.chmod(0o644)


class TestMain:
    def test_full_report(self, write_csv, sample_lines, capsys):
        exit_code = main([str(write_csv(sample_lines))])
        out, err = capsys.readouterr()

        assert exit_code == 0
        assert "CSV header validation passed" in out
        assert "Processed 4 valid timesheet entries" in out
        assert "TIMESHEET SUMMARY REPORT" in out
        assert "Report generation completed successfully" in out
        assert "WARNING: Malformed line 4: Invalid hours value 'abc'" in err
        assert "WARNING: Malformed line 6: Missing fields" in err
        assert "WARNING: Encountered 2 malformed line(s)" in err

    def test_no_malformed_lines(self, write_csv, header, capsys):
        exit_code = main([str(write_csv([header, "E1,2024-01-01,8,Alpha"]))])
        out, _ = capsys.readouterr()
        assert exit_code == 0
        assert "No malformed lines found" in out
        assert "No employees worked more than 40 hours" in out

    def test_missing_argument(self, capsys):
        assert main([]) == 1
        _, err = capsys.readouterr()
        assert "ERROR: No input file specified" in err

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "EmployeeID,Date,HoursWorked,ProjectName" in capsys.readouterr().out

    def test_file_not_found(self, tmp_path, capsys):
        missing = tmp_path / "missing.csv"
        assert main([str(missing)]) == 1
        assert f"File '{missing}' does not exist" in capsys.readouterr().err

    def test_empty_file(self, tmp_path, capsys):
        path = tmp_path / "empty.csv"
        path.touch()
        assert main([str(path)]) == 1
        assert "is empty" in capsys.readouterr().err

    def test_header_mismatch_prints_no_report(self, write_csv, capsys):
        path = write_csv(["EmployeeID,Date,HoursWorked", "E1,2024-01-01,8,Alpha"])
        assert main([str(path)]) == 1
        out, err = capsys.readouterr()
        assert "ERROR: Invalid CSV header" in err
        assert "Expected: EmployeeID,Date,HoursWorked,ProjectName" in err
        assert "Found:    EmployeeID,Date,HoursWorked" in err
        assert "TIMESHEET SUMMARY REPORT" not in out

    def test_no_valid_data_prints_no_report(self, write_csv, header, capsys):
        path = write_csv([header, "E2,2024-01-01,abc,Beta"])
        assert main([str(path)]) == 1
        out, err = capsys.readouterr()
        assert "Processed 0 valid timesheet entries" in out
        assert "ERROR: No valid data to process" in err
        assert "TIMESHEET SUMMARY REPORT" not in out

    def test_header_only_file(self, write_csv, header, capsys):
        assert main([str(write_csv([header]))]) == 1
        assert "No valid data to process" in capsys.readouterr().err

    def test_latin1_project_name(self, tmp_path, header, capsys):
        path = tmp_path / "latin1.csv"
        path.write_bytes(f"{header}\nE1,2024-01-01,45,Alpha\n".encode() + b"E2,2024-01-01,8,M\xfcller\n")
        assert main([str(path)]) == 0
        out, err = capsys.readouterr()
        assert "M\u00fcller" in out
        assert "Malformed line" not in err

    def test_invalid_threshold_setting(self, write_csv, sample_lines, monkeypatch, capsys):
        monkeypatch.setenv("TIMESHEET_OVERTIME_THRESHOLD", "forty")
        assert main([str(write_csv(sample_lines))]) == 1
        out, err = capsys.readouterr()
        assert "ERROR: TIMESHEET_OVERTIME_THRESHOLD must be a non-negative integer" in err
        assert "TIMESHEET SUMMARY REPORT" not in out

    def test_excel_export(self, write_csv, sample_lines, tmp_path, capsys):
        excel_path = tmp_path / "out" / "summary.xlsx"
        assert main([str(write_csv(sample_lines)), "--excel", str(excel_path)]) == 0
        assert excel_path.exists()
        assert "Saved Excel report to" in capsys.readouterr().out


class TestResolveExcelPath:
    def test_bare_filename_goes_to_output_dir(self):
        assert resolve_excel_path("summary.xlsx") == OUTPUT_DIR / "summary.xlsx"

    def test_path_with_directory_kept(self, tmp_path):
        assert resolve_excel_path(str(tmp_path / "summary.xlsx")) == tmp_path / "summary.xlsx"
