"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DATA_DIR: str = os.getenv("DATA_DIR", "Data")

    # Snapshot and grading files, resolved relative to DATA_DIR unless absolute
    INVENTORY_SNAPSHOT_FILE: str = os.getenv("INVENTORY_SNAPSHOT_FILE", "inventory.json")
    STUDENTS_INPUT_FILE: str = os.getenv("STUDENTS_INPUT_FILE", "students.txt")
    REPORT_OUTPUT_FILE: str = os.getenv("REPORT_OUTPUT_FILE", "report.txt")

    # Timezone used for report timestamps; record timestamps are always UTC
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL

    def data_path(self, file_name: str) -> str:
        """Returns file_name joined onto DATA_DIR, leaving absolute paths alone."""
        if os.path.isabs(file_name):
            return file_name
        return os.path.join(self.DATA_DIR, file_name)


settings = Settings()
