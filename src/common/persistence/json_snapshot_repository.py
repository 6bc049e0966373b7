# src/common/persistence/json_snapshot_repository.py
"""JSON file snapshots of keyed entities."""

import json
import logging
import os
from typing import Generic, Iterable

from src.common.exceptions.custom_exceptions import (
    ApplicationError,
    DecodeError,
    InvalidValueError,
    PersistenceError,
)
from src.common.repositories.keyed_repository import T

logger = logging.getLogger(__name__)


class JsonSnapshotRepository(Generic[T]):
    """
    Saves and restores a full sequence of entities as one JSON array.

    Neither save() nor load() raises on I/O or decode problems: the failure is
    logged, kept in ``last_error``, and the call returns False / an empty list.
    Loading is all-or-nothing, so a partially valid file yields no entities.
    """

    def __init__(self, entity_type: type[T], file_path: str, indent: int | None = 2) -> None:
        self.entity_type = entity_type
        self.file_path = file_path
        self.indent = indent
        self.last_error: ApplicationError | None = None

    def save(self, entities: Iterable[T]) -> bool:
        """Overwrites the snapshot file with the given entities."""
        self.last_error = None
        data = [entity.to_dict() for entity in entities]

        try:
            directory = os.path.dirname(self.file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=self.indent, ensure_ascii=False)
        except PermissionError as e:
            return self._fail(PersistenceError(self.file_path, "Permission denied while saving snapshot", e))
        except OSError as e:
            return self._fail(PersistenceError(self.file_path, "I/O error while saving snapshot", e))

        logger.info(f"Saved {len(data)} item(s) to '{self.file_path}'.")
        return True

    def load(self) -> list[T]:
        """Reads the snapshot file; any problem yields an empty list."""
        self.last_error = None

        if not os.path.exists(self.file_path):
            logger.info(f"No file found at '{self.file_path}'. Nothing to load.")
            return []

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            self._fail(DecodeError(self.file_path, "Snapshot is not valid UTF-8", e))
            return []
        except OSError as e:
            self._fail(PersistenceError(self.file_path, "I/O error while loading snapshot", e))
            return []

        if not content.strip():
            logger.info(f"File '{self.file_path}' is empty. Loaded 0 items.")
            return []

        try:
            entities = self._decode(content)
        except DecodeError as e:
            self._fail(e)
            return []

        logger.info(f"Loaded {len(entities)} item(s) from '{self.file_path}'.")
        return entities

    def _decode(self, content: str) -> list[T]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise DecodeError(self.file_path, "Snapshot is not valid JSON", e)

        if data is None:
            return []
        if not isinstance(data, list):
            raise DecodeError(self.file_path, f"Expected a JSON array, got {type(data).__name__}")

        entities: list[T] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise DecodeError(self.file_path, f"Element {index} is not an object")
            try:
                entities.append(self.entity_type.from_dict(item))
            except (InvalidValueError, TypeError) as e:
                raise DecodeError(self.file_path, f"Element {index} is not a valid {self.entity_type.__name__}", e)
        return entities

    def _fail(self, error: ApplicationError) -> bool:
        self.last_error = error
        logger.error(str(error))
        return False
