# src/common/repositories/keyed_repository.py
"""Keyed entity repository interface."""
from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from src.common.entities.keyed_entity import KeyedEntity

T = TypeVar("T", bound=KeyedEntity)


class IKeyedRepository(ABC, Generic[T]):

    @abstractmethod
    def add(self, item: T) -> None:
        """Adds an item; raises DuplicateKeyError if its id is already present."""
        pass

    @abstractmethod
    def get(self, entity_id: int) -> T:
        """Retrieves an item by id; raises NotFoundError if absent."""
        pass

    @abstractmethod
    def get_all(self) -> list[T]:
        """Retrieves a snapshot of all items in insertion order."""
        pass

    @abstractmethod
    def remove(self, entity_id: int) -> None:
        """Removes an item by id; raises NotFoundError if absent."""
        pass

    @abstractmethod
    def update_quantity(self, entity_id: int, new_quantity: int) -> None:
        """Replaces the quantity of an item; the value is validated before the id is looked up."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Returns the number of items held."""
        pass

    @abstractmethod
    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Returns the first item matching predicate, or None."""
        pass

    @abstractmethod
    def find_all(self, predicate: Callable[[T], bool]) -> list[T]:
        """Returns every item matching predicate in insertion order."""
        pass
