"""Dictionary-backed implementation of the keyed repository."""

import copy
import dataclasses
import logging
from typing import Callable, Optional

from src.common.exceptions.custom_exceptions import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
)
from src.common.repositories.keyed_repository import IKeyedRepository, T

logger = logging.getLogger(__name__)


class InMemoryKeyedRepository(IKeyedRepository[T]):
    """
    Holds entities of one type keyed by id.

    Items handed in and out are copied, so the only way to change stored
    state is through the repository's own methods. Dict insertion order is
    the enumeration order.
    """

    def __init__(self, items: Optional[list[T]] = None) -> None:
        self._items: dict[int, T] = {}
        for item in items or []:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def add(self, item: T) -> None:
        entity_id = getattr(item, "id", None)
        if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
            raise InvalidValueError("id", entity_id, f"Cannot add {type(item).__name__}: id must be a positive integer.")
        if entity_id in self._items:
            raise DuplicateKeyError(entity_id, f"Item with ID {entity_id} already exists in the inventory.")

        self._items[entity_id] = copy.copy(item)
        logger.debug(f"Added {type(item).__name__} {entity_id}. Total count: {len(self._items)}")

    def get(self, entity_id: int) -> T:
        try:
            return copy.copy(self._items[entity_id])
        except KeyError:
            raise NotFoundError(entity_id, f"Item with ID {entity_id} was not found in the inventory.") from None

    def get_all(self) -> list[T]:
        return [copy.copy(item) for item in self._items.values()]

    def remove(self, entity_id: int) -> None:
        if entity_id not in self._items:
            raise NotFoundError(entity_id, f"Cannot remove item with ID {entity_id}: item not found in inventory.")
        del self._items[entity_id]
        logger.debug(f"Removed item {entity_id}. Total count: {len(self._items)}")

    def update_quantity(self, entity_id: int, new_quantity: int) -> None:
        # Value check comes first: a negative quantity is reported even for a missing id.
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int) or new_quantity < 0:
            raise InvalidValueError(
                "quantity", new_quantity, f"Quantity cannot be negative. Provided value: {new_quantity}"
            )

        item = self._items.get(entity_id)
        if item is None:
            raise NotFoundError(
                entity_id, f"Cannot update quantity for item with ID {entity_id}: item not found in inventory."
            )
        if not hasattr(item, "quantity"):
            raise InvalidValueError(
                "quantity", new_quantity, f"{type(item).__name__} has no quantity field to update."
            )

        # replace() re-runs entity validation before the stored item is swapped
        self._items[entity_id] = dataclasses.replace(item, quantity=new_quantity)
        logger.debug(f"Quantity for item {entity_id} set to {new_quantity}")

    def count(self) -> int:
        return len(self._items)

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self._items.values():
            candidate = copy.copy(item)
            if predicate(candidate):
                return candidate
        return None

    def find_all(self, predicate: Callable[[T], bool]) -> list[T]:
        candidates = (copy.copy(item) for item in self._items.values())
        return [item for item in candidates if predicate(item)]
