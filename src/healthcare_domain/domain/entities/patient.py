"""Patient entity."""

from dataclasses import dataclass

from src.common.entities.keyed_entity import KeyedEntity, require_non_empty_str
from src.common.exceptions.custom_exceptions import InvalidValueError

MAX_PATIENT_AGE = 150


@dataclass
class Patient(KeyedEntity):
    name: str
    age: int
    gender: str

    def __post_init__(self) -> None:
        super().__post_init__()
        require_non_empty_str("name", self.name)
        if isinstance(self.age, bool) or not isinstance(self.age, int) or not 0 <= self.age <= MAX_PATIENT_AGE:
            raise InvalidValueError("age", self.age, f"Patient age must be between 0 and {MAX_PATIENT_AGE}.")
        require_non_empty_str("gender", self.gender)

    def __str__(self) -> str:
        return f"Patient [ID: {self.id}] {self.name}, Age: {self.age}, Gender: {self.gender}"
