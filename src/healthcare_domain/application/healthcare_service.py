# src/healthcare_domain/application/healthcare_service.py
"""Application service for patient and prescription lookups."""

import logging
from datetime import timedelta
from typing import Optional

from src.common.exceptions.custom_exceptions import ApplicationError
from src.common.repositories.in_memory_keyed_repository import InMemoryKeyedRepository
from src.common.repositories.keyed_repository import IKeyedRepository
from src.common.utils.date_utils import utc_now
from src.healthcare_domain.domain.entities.patient import Patient
from src.healthcare_domain.domain.entities.prescription import Prescription

logger = logging.getLogger(__name__)


class HealthcareApplicationService:

    def __init__(
        self,
        patient_repo: IKeyedRepository[Patient] | None = None,
        prescription_repo: IKeyedRepository[Prescription] | None = None,
    ) -> None:
        self.patient_repo = patient_repo if patient_repo is not None else InMemoryKeyedRepository()
        self.prescription_repo = prescription_repo if prescription_repo is not None else InMemoryKeyedRepository()

    def seed_data(self) -> bool:
        logger.info("Seeding sample patients and prescriptions...")
        now = utc_now()
        try:
            self.patient_repo.add(Patient(1, "John Doe", 45, "Male"))
            self.patient_repo.add(Patient(2, "Jane Smith", 32, "Female"))
            self.patient_repo.add(Patient(3, "Bob Johnson", 67, "Male"))

            self.prescription_repo.add(Prescription(101, 1, "Aspirin", now - timedelta(days=5)))
            self.prescription_repo.add(Prescription(102, 1, "Lisinopril", now - timedelta(days=3)))
            self.prescription_repo.add(Prescription(103, 2, "Metformin", now - timedelta(days=7)))
            self.prescription_repo.add(Prescription(104, 2, "Vitamin D3", now - timedelta(days=1)))
            self.prescription_repo.add(Prescription(105, 3, "Warfarin", now - timedelta(days=10)))
        except ApplicationError as e:
            logger.error(f"Error seeding data: {e}")
            return False

        logger.info(
            f"Seeding completed! Patients: {self.patient_repo.count()}, "
            f"Prescriptions: {self.prescription_repo.count()}"
        )
        return True

    def find_patient(self, patient_id: int) -> Optional[Patient]:
        """Looks a patient up by id through a predicate search."""
        patient = self.patient_repo.find_first(lambda p: p.id == patient_id)
        if patient is None:
            logger.warning(f"Patient with ID {patient_id} not found in the system.")
        return patient

    def get_prescriptions_for_patient(self, patient_id: int) -> list[Prescription]:
        prescriptions = self.prescription_repo.find_all(lambda p: p.patient_id == patient_id)
        if not prescriptions:
            logger.warning(f"No prescriptions found for Patient {patient_id}")
        return prescriptions

    def get_statistics(self) -> dict:
        patients_with_prescriptions = {p.patient_id for p in self.prescription_repo.get_all()}
        return {
            "total_patients": self.patient_repo.count(),
            "total_prescriptions": self.prescription_repo.count(),
            "patients_with_prescriptions": len(patients_with_prescriptions),
        }
