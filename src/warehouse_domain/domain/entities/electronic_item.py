"""Electronic item entity."""

from dataclasses import dataclass

from src.common.entities.keyed_entity import StockItem, require_non_empty_str, require_non_negative_int


@dataclass
class ElectronicItem(StockItem):
    """An electronics product held in the warehouse."""

    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        super().__post_init__()
        require_non_empty_str("brand", self.brand)
        require_non_negative_int("warranty_months", self.warranty_months)

    def __str__(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Brand: {self.brand}, Warranty: {self.warranty_months} months"
        )
