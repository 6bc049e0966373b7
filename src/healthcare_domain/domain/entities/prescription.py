"""Prescription entity."""

from dataclasses import dataclass
from datetime import datetime

from src.common.entities.keyed_entity import KeyedEntity, require_non_empty_str, require_positive_int
from src.common.exceptions.custom_exceptions import InvalidValueError
from src.common.utils.date_utils import utc_now


@dataclass
class Prescription(KeyedEntity):
    """A medication issued to a patient; issue dates in the future are rejected."""

    patient_id: int
    medication_name: str
    date_issued: datetime

    def __post_init__(self) -> None:
        super().__post_init__()
        require_positive_int("patient_id", self.patient_id)
        require_non_empty_str("medication_name", self.medication_name)
        if not isinstance(self.date_issued, datetime) or self.date_issued.tzinfo is None:
            raise InvalidValueError("date_issued", self.date_issued, "date_issued must be a timezone-aware datetime.")
        if self.date_issued > utc_now():
            raise InvalidValueError("date_issued", self.date_issued, "Prescription date cannot be in the future.")

    def __str__(self) -> str:
        return (
            f"Prescription [ID: {self.id}] {self.medication_name} for Patient {self.patient_id} "
            f"| Issued: {self.date_issued:%Y-%m-%d}"
        )
