"""Grocery item entity."""

from dataclasses import dataclass
from datetime import date, datetime

from src.common.entities.keyed_entity import StockItem
from src.common.exceptions.custom_exceptions import InvalidValueError


@dataclass
class GroceryItem(StockItem):
    """A perishable product held in the warehouse."""

    expiry_date: date

    def __post_init__(self) -> None:
        super().__post_init__()
        # datetime is a date subclass, but a time part would not survive serialization
        if isinstance(self.expiry_date, datetime) or not isinstance(self.expiry_date, date):
            raise InvalidValueError("expiry_date", self.expiry_date, "expiry_date must be a calendar date without a time.")

    def __str__(self) -> str:
        return f"[Grocery] ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, Expiry: {self.expiry_date:%Y-%m-%d}"
