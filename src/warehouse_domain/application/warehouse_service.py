# src/warehouse_domain/application/warehouse_service.py
"""Application service for warehouse stock management."""

import logging
from datetime import timedelta

from src.common.entities.keyed_entity import StockItem
from src.common.exceptions.custom_exceptions import (
    ApplicationError,
    InvalidValueError,
    NotFoundError,
)
from src.common.repositories.in_memory_keyed_repository import InMemoryKeyedRepository
from src.common.repositories.keyed_repository import IKeyedRepository
from src.common.utils.date_utils import utc_now
from src.warehouse_domain.domain.entities.electronic_item import ElectronicItem
from src.warehouse_domain.domain.entities.grocery_item import GroceryItem

logger = logging.getLogger(__name__)


class WarehouseApplicationService:
    """Manages the electronics and grocery stores of one warehouse."""

    def __init__(
        self,
        electronics_repo: IKeyedRepository[ElectronicItem] | None = None,
        groceries_repo: IKeyedRepository[GroceryItem] | None = None,
    ) -> None:
        self.electronics = electronics_repo if electronics_repo is not None else InMemoryKeyedRepository()
        self.groceries = groceries_repo if groceries_repo is not None else InMemoryKeyedRepository()

    def seed_data(self) -> bool:
        """Loads the sample electronics and groceries. Returns False if any add failed."""
        logger.info("Seeding inventory with sample data...")
        today = utc_now().date()
        try:
            self.electronics.add(ElectronicItem(1, "iPhone 15 Pro", 25, "Apple", 12))
            self.electronics.add(ElectronicItem(2, "Samsung Galaxy S24", 30, "Samsung", 24))
            self.electronics.add(ElectronicItem(3, "Dell XPS 13 Laptop", 15, "Dell", 36))

            self.groceries.add(GroceryItem(101, "Organic Bananas", 50, today + timedelta(days=7)))
            self.groceries.add(GroceryItem(102, "Whole Milk", 20, today + timedelta(days=5)))
            self.groceries.add(GroceryItem(103, "Sourdough Bread", 12, today + timedelta(days=3)))
        except ApplicationError as e:
            logger.error(f"Error seeding data: {e}")
            return False

        logger.info(
            f"Sample data loaded: {self.electronics.count()} electronic items, {self.groceries.count()} grocery items."
        )
        return True

    def increase_stock(self, repo: IKeyedRepository[StockItem], entity_id: int, amount: int) -> bool:
        """Adds amount to an item's quantity. Failures are logged and reported as False."""
        try:
            item = repo.get(entity_id)
            new_quantity = item.quantity + amount
            repo.update_quantity(entity_id, new_quantity)
        except NotFoundError as e:
            logger.error(f"Cannot increase stock: {e}")
            return False
        except InvalidValueError as e:
            logger.error(f"Invalid quantity operation: {e}")
            return False

        logger.info(f"Stock increased! Item '{item.name}' quantity updated from {item.quantity} to {new_quantity}")
        return True

    def remove_item(self, repo: IKeyedRepository[StockItem], entity_id: int) -> bool:
        """Removes an item by id. Failures are logged and reported as False."""
        try:
            item = repo.get(entity_id)
            repo.remove(entity_id)
        except NotFoundError as e:
            logger.error(f"Cannot remove item: {e}")
            return False

        logger.info(f"Item removed successfully! '{item.name}' (ID: {entity_id}) has been removed from inventory.")
        return True

    def get_stock_statistics(self) -> dict:
        """Returns item counts and unit totals per category."""
        electronics = self.electronics.get_all()
        groceries = self.groceries.get_all()
        return {
            "electronic_items": len(electronics),
            "grocery_items": len(groceries),
            "electronic_units": sum(item.quantity for item in electronics),
            "grocery_units": sum(item.quantity for item in groceries),
        }
