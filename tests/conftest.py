# tests/conftest.py
from datetime import date, datetime

import pytest
import pytz

from src.common.config.settings import settings
from src.common.persistence.json_snapshot_repository import JsonSnapshotRepository
from src.common.repositories.in_memory_keyed_repository import InMemoryKeyedRepository
from src.inventory_domain.domain.entities.inventory_item import InventoryItem
from src.warehouse_domain.domain.entities.electronic_item import ElectronicItem
from src.warehouse_domain.domain.entities.grocery_item import GroceryItem


@pytest.fixture(autouse=True)
def mock_settings_timezone(mocker) -> None:
    """Pins the report timezone so timestamps do not depend on the environment."""
    mocker.patch.object(settings, "TIMEZONE", "UTC")


@pytest.fixture
def sample_electronic_item() -> ElectronicItem:
    return ElectronicItem(1, "iPhone 15 Pro", 25, "Apple", 12)


@pytest.fixture
def sample_grocery_item() -> GroceryItem:
    return GroceryItem(101, "Organic Bananas", 50, date(2026, 10, 26))


@pytest.fixture
def electronics_repo(sample_electronic_item) -> InMemoryKeyedRepository[ElectronicItem]:
    """Store pre-loaded with three electronic items (ids 1, 2, 3)."""
    return InMemoryKeyedRepository(
        [
            sample_electronic_item,
            ElectronicItem(2, "Samsung Galaxy S24", 30, "Samsung", 24),
            ElectronicItem(3, "Dell XPS 13 Laptop", 15, "Dell", 36),
        ]
    )


@pytest.fixture
def sample_inventory_items() -> list[InventoryItem]:
    added = datetime(2026, 10, 19, 8, 30, 15, 123456, tzinfo=pytz.utc)
    return [
        InventoryItem(1, "USB-C Cable", 30, added),
        InventoryItem(2, "Wireless Mouse", 15, added),
        InventoryItem(3, '27" Monitor', 5, added),
    ]


@pytest.fixture
def snapshot_path(tmp_path) -> str:
    return str(tmp_path / "data" / "inventory.json")


@pytest.fixture
def inventory_snapshot_repo(snapshot_path) -> JsonSnapshotRepository[InventoryItem]:
    return JsonSnapshotRepository(InventoryItem, snapshot_path)
