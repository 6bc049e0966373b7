"""Inventory record entity."""

from dataclasses import dataclass
from datetime import datetime

from src.common.entities.keyed_entity import StockItem
from src.common.exceptions.custom_exceptions import InvalidValueError


@dataclass
class InventoryItem(StockItem):
    """A stock record stamped with the UTC time it was added."""

    date_added: datetime

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.date_added, datetime) or self.date_added.tzinfo is None:
            raise InvalidValueError("date_added", self.date_added, "date_added must be a timezone-aware datetime.")
