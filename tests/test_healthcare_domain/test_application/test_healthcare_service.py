"""Tests for the Healthcare Application Service."""

import pytest

from src.healthcare_domain.application.healthcare_service import HealthcareApplicationService


@pytest.fixture
def healthcare_service() -> HealthcareApplicationService:
    service = HealthcareApplicationService()
    assert service.seed_data() is True
    return service


def test_find_patient_by_predicate(healthcare_service) -> None:
    patient = healthcare_service.find_patient(2)

    assert patient is not None
    assert patient.name == "Jane Smith"


def test_find_unknown_patient_returns_none(healthcare_service) -> None:
    assert healthcare_service.find_patient(99) is None


def test_get_prescriptions_for_patient_in_insertion_order(healthcare_service) -> None:
    prescriptions = healthcare_service.get_prescriptions_for_patient(1)

    assert [p.medication_name for p in prescriptions] == ["Aspirin", "Lisinopril"]
    assert healthcare_service.get_prescriptions_for_patient(99) == []


def test_get_statistics(healthcare_service) -> None:
    assert healthcare_service.get_statistics() == {
        "total_patients": 3,
        "total_prescriptions": 5,
        "patients_with_prescriptions": 3,
    }
