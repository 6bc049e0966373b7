# src/grading_domain/infrastructure/parsers/line_record_codec.py
"""Parser and report writer for comma-delimited student records."""

import logging
import os
import re
from collections import Counter
from datetime import datetime
from typing import Iterable

from src.common.exceptions.custom_exceptions import (
    InvalidFormatError,
    InvalidValueError,
    MissingFieldError,
    PersistenceError,
)
from src.common.utils.date_utils import format_timestamp, utc_now
from src.grading_domain.domain.entities.student import Student

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
EXPECTED_FIELDS = ("ID", "Name", "Score")
_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def _parse_int(value: str, field_name: str, line_number: int, line: str) -> int:
    # int() alone would also accept "1_000" and unicode digits
    if not _INTEGER_PATTERN.match(value):
        raise InvalidFormatError(
            f"{field_name} '{value}' is not a valid integer in line: '{line}'",
            line_number=line_number,
            line=line,
            field_name=field_name,
        )
    return int(value)


def parse_line(line: str, line_number: int) -> Student:
    """Parses one non-blank line into a Student, raising a line-tagged error on failure."""
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != len(EXPECTED_FIELDS):
        raise MissingFieldError(
            f"Expected {len(EXPECTED_FIELDS)} fields ({','.join(EXPECTED_FIELDS)}) but found {len(fields)} in line: '{line}'",
            line_number=line_number,
            line=line,
        )

    id_str, full_name, score_str = (field.strip() for field in fields)
    if not id_str or not full_name or not score_str:
        raise MissingFieldError(
            f"One or more fields are empty in line: '{line}'", line_number=line_number, line=line
        )

    student_id = _parse_int(id_str, "Student ID", line_number, line)
    score = _parse_int(score_str, "Score", line_number, line)

    try:
        return Student(id=student_id, full_name=full_name, score=score)
    except InvalidValueError as e:
        raise InvalidValueError(e.field_name, e.value, f"Line {line_number}: {e.message} in line: '{line}'") from e


def parse_records(lines: Iterable[str]) -> list[Student]:
    """
    Parses student lines in order.

    Blank lines are skipped. The first bad line aborts the whole batch and
    its error carries the 1-based line number, so no partial list escapes.
    """
    students: list[Student] = []
    for line_number, raw_line in enumerate(lines, 1):
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            logger.debug(f"Skipping empty line {line_number}")
            continue
        students.append(parse_line(line, line_number))
    return students


def read_records_from_file(input_file_path: str) -> list[Student]:
    """Reads and parses a UTF-8 student file."""
    try:
        with open(input_file_path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise PersistenceError(input_file_path, "Input file is not valid UTF-8", e)
    except FileNotFoundError as e:
        raise PersistenceError(input_file_path, "Input file not found", e)
    except OSError as e:
        raise PersistenceError(input_file_path, "Could not read input file", e)

    students = parse_records(lines)
    logger.info(f"Successfully processed {len(students)} student records from '{input_file_path}'.")
    return students


def grade_distribution(students: Iterable[Student]) -> dict[str, int]:
    """Counts students per letter grade, ordered by letter."""
    counts = Counter(student.grade for student in students)
    return dict(sorted(counts.items()))


def write_report(students: list[Student], generated_at: datetime | None = None) -> str:
    """Builds the plain-text grade report."""
    generated_at = generated_at or utc_now()
    lines = [
        "STUDENT GRADE REPORT",
        "===================",
        f"Generated on: {format_timestamp(generated_at)}",
        f"Total Students: {len(students)}",
        "",
    ]

    if not students:
        lines.append("No students found in the input file.")
        return "\n".join(lines) + "\n"

    lines.extend(["INDIVIDUAL RESULTS:", "------------------"])
    lines.extend(str(student) for student in students)
    lines.extend(["", "SUMMARY STATISTICS:", "------------------"])

    for grade, count in grade_distribution(students).items():
        lines.append(f"Grade {grade}: {count} students")

    scores = [student.score for student in students]
    lines.append(f"Average Score: {sum(scores) / len(scores):.2f}")
    lines.append(f"Highest Score: {max(scores)}")
    lines.append(f"Lowest Score: {min(scores)}")
    return "\n".join(lines) + "\n"


def write_report_to_file(students: list[Student], output_file_path: str, generated_at: datetime | None = None) -> None:
    """Writes the report, replacing any existing file."""
    report = write_report(students, generated_at)
    try:
        directory = os.path.dirname(output_file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_file_path, "w", encoding="utf-8") as f:
            f.write(report)
    except OSError as e:
        raise PersistenceError(output_file_path, "Could not write report", e)
    logger.info(f"Report successfully written to: {output_file_path}")
