# src/grading_domain/application/grading_service.py
"""Application service turning a student results file into a grade report."""

import logging
import os

from src.common.exceptions.custom_exceptions import PersistenceError
from src.common.utils.date_utils import now_in_timezone
from src.grading_domain.domain.entities.student import Student
from src.grading_domain.infrastructure.parsers import line_record_codec

logger = logging.getLogger(__name__)

SAMPLE_STUDENT_LINES = [
    "101,Alice Johnson,85",
    "102,Bob Smith,72",
    "103,Carol Davis,68",
    "104,David Wilson,91",
    "105,Emma Brown,45",
    "106,Frank Miller,77",
    "107,Grace Lee,83",
]


class GradingApplicationService:

    def __init__(self, report_timezone: str = "UTC") -> None:
        self.report_timezone = report_timezone

    def process_results(self, input_file_path: str, output_file_path: str) -> list[Student]:
        """
        Reads the student file and writes the grade report.

        Parse and I/O errors propagate to the caller unchanged; nothing is
        written when the input cannot be parsed.
        """
        logger.info(f"Reading student data from '{input_file_path}'...")
        students = line_record_codec.read_records_from_file(input_file_path)

        logger.info("Generating grade report...")
        line_record_codec.write_report_to_file(
            students, output_file_path, generated_at=now_in_timezone(self.report_timezone)
        )
        return students

    def build_report(self, students: list[Student]) -> str:
        return line_record_codec.write_report(students, generated_at=now_in_timezone(self.report_timezone))

    def create_sample_input_file(self, input_file_path: str) -> None:
        """Writes the sample student lines, replacing any existing file."""
        try:
            directory = os.path.dirname(input_file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(input_file_path, "w", encoding="utf-8") as f:
                f.write("\n".join(SAMPLE_STUDENT_LINES) + "\n")
        except OSError as e:
            raise PersistenceError(input_file_path, "Could not write sample input file", e)
        logger.info(f"Sample input file created: {input_file_path}")
