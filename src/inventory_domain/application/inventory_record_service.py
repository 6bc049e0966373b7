# src/inventory_domain/application/inventory_record_service.py
"""Application service for inventory records persisted as JSON snapshots."""

import logging

from src.common.exceptions.custom_exceptions import DuplicateKeyError
from src.common.persistence.json_snapshot_repository import JsonSnapshotRepository
from src.common.repositories.in_memory_keyed_repository import InMemoryKeyedRepository
from src.common.utils.date_utils import utc_now
from src.inventory_domain.domain.entities.inventory_item import InventoryItem

logger = logging.getLogger(__name__)


class InventoryRecordApplicationService:
    """Keeps inventory records in memory and syncs them with a snapshot file."""

    def __init__(self, snapshot_repo: JsonSnapshotRepository[InventoryItem]) -> None:
        self.snapshot_repo = snapshot_repo
        self.records: InMemoryKeyedRepository[InventoryItem] = InMemoryKeyedRepository()

    def seed_sample_data(self) -> None:
        """Replaces the in-memory records with the sample set."""
        now = utc_now()
        self.records = InMemoryKeyedRepository(
            [
                InventoryItem(1, "USB-C Cable", 30, now),
                InventoryItem(2, "Wireless Mouse", 15, now),
                InventoryItem(3, "Mechanical Keyboard", 8, now),
                InventoryItem(4, '27" Monitor', 5, now),
                InventoryItem(5, "Laptop Stand", 12, now),
            ]
        )
        logger.info(f"Seeded {self.records.count()} sample records (in-memory).")

    def save_data(self) -> bool:
        """Writes all records to the snapshot file."""
        return self.snapshot_repo.save(self.records.get_all())

    def load_data(self) -> int:
        """
        Replaces the in-memory records with the snapshot contents.

        A snapshot holding the same id twice is rejected as a whole and the
        current records are kept. Returns the number of records now held.
        """
        items = self.snapshot_repo.load()
        if self.snapshot_repo.last_error is not None:
            logger.warning("Snapshot could not be loaded; starting from an empty record set.")

        try:
            self.records = InMemoryKeyedRepository(items)
        except DuplicateKeyError as e:
            logger.error(f"Snapshot '{self.snapshot_repo.file_path}' rejected: {e}")
        return self.records.count()

    def get_all_items(self) -> list[InventoryItem]:
        return self.records.get_all()
