"""Main application entry point for the warehouse, inventory, grading and healthcare flows."""

import argparse
import logging
import os
import sys

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError
from src.common.logger_config import setup_logging
from src.common.persistence.json_snapshot_repository import JsonSnapshotRepository
from src.common.utils.date_utils import format_timestamp
from src.grading_domain.application.grading_service import GradingApplicationService
from src.grading_domain.infrastructure.parsers.line_record_codec import grade_distribution
from src.healthcare_domain.application.healthcare_service import HealthcareApplicationService
from src.inventory_domain.application.inventory_record_service import InventoryRecordApplicationService
from src.inventory_domain.domain.entities.inventory_item import InventoryItem
from src.warehouse_domain.application.warehouse_service import WarehouseApplicationService

logger = logging.getLogger(__name__)

PREVIEW_COUNT = 3


def print_items(title: str, items: list) -> None:
    print(f"\n{title}")
    if not items:
        print("   No items found in this category.")
        return
    for item in items:
        print(f"   {item}")
    print(f"   Total items: {len(items)}")


def run_warehouse() -> None:
    """Seeds the warehouse and exercises stock updates, including the failure paths."""
    service = WarehouseApplicationService()
    service.seed_data()

    print_items("Electronics:", service.electronics.get_all())
    print_items("Groceries:", service.groceries.get_all())

    service.increase_stock(service.electronics, 1, 10)
    service.increase_stock(service.groceries, 102, -50)  # rejected: would go negative
    service.remove_item(service.groceries, 103)
    service.remove_item(service.electronics, 999)  # rejected: unknown id

    print_items("Electronics after updates:", service.electronics.get_all())
    print_items("Groceries after updates:", service.groceries.get_all())
    print(f"\nStatistics: {service.get_stock_statistics()}")


def run_inventory(snapshot_path: str) -> None:
    """Seeds records, saves them, then reloads them into a fresh service."""
    service = InventoryRecordApplicationService(JsonSnapshotRepository(InventoryItem, snapshot_path))
    service.seed_sample_data()
    if not service.save_data():
        raise ApplicationError(f"Could not save inventory snapshot to {snapshot_path}")

    reloaded = InventoryRecordApplicationService(JsonSnapshotRepository(InventoryItem, snapshot_path))
    reloaded.load_data()

    print("\nInventory items:")
    print("----------------")
    for item in reloaded.get_all_items():
        print(f"Id: {item.id}")
        print(f"Name: {item.name}")
        print(f"Quantity: {item.quantity}")
        print(f"DateAdded (UTC): {format_timestamp(item.date_added)}")
        print()


def run_grading(input_path: str, output_path: str) -> None:
    """Parses the student file (creating the sample one if missing) and writes the report."""
    service = GradingApplicationService(report_timezone=settings.TIMEZONE)
    if not os.path.exists(input_path):
        service.create_sample_input_file(input_path)

    students = service.process_results(input_path, output_path)
    print(f"\nReport saved to: {output_path}")

    print("\nRESULTS PREVIEW:")
    for student in students[:PREVIEW_COUNT]:
        print(f"  {student}")
    if len(students) > PREVIEW_COUNT:
        print(f"  ... and {len(students) - PREVIEW_COUNT} more students")

    print("\nGrade Distribution:")
    for grade, count in grade_distribution(students).items():
        print(f"  Grade {grade}: {count} students")


def run_healthcare() -> None:
    service = HealthcareApplicationService()
    service.seed_data()

    print("\nAll Patients in the System:")
    for patient in service.patient_repo.get_all():
        print(f"   {patient}")

    for patient in service.patient_repo.get_all():
        print(f"\nPrescriptions for {patient.name}:")
        for prescription in service.get_prescriptions_for_patient(patient.id):
            print(f"   {prescription}")

    print(f"\nStatistics: {service.get_statistics()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keyed record stores, grading reports and JSON snapshots.")
    parser.add_argument(
        "command",
        nargs="?",
        default="all",
        choices=["warehouse", "inventory", "grading", "healthcare", "all"],
        help="Which flow to run (default: all)",
    )
    parser.add_argument("--input", default=settings.data_path(settings.STUDENTS_INPUT_FILE), help="Student results file")
    parser.add_argument("--output", default=settings.data_path(settings.REPORT_OUTPUT_FILE), help="Grade report file")
    parser.add_argument(
        "--snapshot", default=settings.data_path(settings.INVENTORY_SNAPSHOT_FILE), help="Inventory snapshot file"
    )
    parser.add_argument("--log-file", default=None, help="Optional log file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_file=args.log_file)

    runners = {
        "warehouse": run_warehouse,
        "inventory": lambda: run_inventory(args.snapshot),
        "grading": lambda: run_grading(args.input, args.output),
        "healthcare": run_healthcare,
    }
    selected = list(runners) if args.command == "all" else [args.command]

    try:
        for name in selected:
            logger.info(f"--- Running {name} ---")
            runners[name]()
    except ApplicationError as e:
        logger.error(f"An error occurred: {e}")
        return 1

    logger.info("All requested flows completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
