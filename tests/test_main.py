"""Tests for the command-line entry point."""

import pytest

import main


@pytest.fixture(autouse=True)
def no_logging_setup(mocker) -> None:
    """Keeps main() from replacing pytest's log handlers."""
    mocker.patch("main.setup_logging")


def test_grading_command_creates_sample_and_report(tmp_path, capsys) -> None:
    input_path = tmp_path / "students.txt"
    output_path = tmp_path / "report.txt"

    exit_code = main.main(["grading", "--input", str(input_path), "--output", str(output_path)])

    assert exit_code == 0
    assert input_path.exists()
    assert "Total Students: 7" in output_path.read_text(encoding="utf-8")
    assert "Grade A: 3 students" in capsys.readouterr().out


def test_grading_command_with_bad_input_exits_non_zero(tmp_path) -> None:
    input_path = tmp_path / "missing_fields.txt"
    input_path.write_text("301,Mary Johnson\n302,Tom Wilson,78\n", encoding="utf-8")

    exit_code = main.main(["grading", "--input", str(input_path), "--output", str(tmp_path / "report.txt")])

    assert exit_code == 1


def test_all_command_runs_every_flow(tmp_path) -> None:
    exit_code = main.main(
        [
            "all",
            "--input",
            str(tmp_path / "students.txt"),
            "--output",
            str(tmp_path / "report.txt"),
            "--snapshot",
            str(tmp_path / "inventory.json"),
        ]
    )

    assert exit_code == 0
    assert (tmp_path / "inventory.json").exists()
