"""Tests for entity construction and dict conversion."""

from datetime import date, datetime, timedelta

import pytest
import pytz

from src.common.exceptions.custom_exceptions import InvalidValueError
from src.healthcare_domain.domain.entities.patient import Patient
from src.healthcare_domain.domain.entities.prescription import Prescription
from src.inventory_domain.domain.entities.inventory_item import InventoryItem
from src.warehouse_domain.domain.entities.electronic_item import ElectronicItem
from src.warehouse_domain.domain.entities.grocery_item import GroceryItem


@pytest.mark.parametrize(
    "kwargs, field_name",
    [
        ({"id": 0, "name": "Phone", "quantity": 1, "brand": "Apple", "warranty_months": 12}, "id"),
        ({"id": 1, "name": "  ", "quantity": 1, "brand": "Apple", "warranty_months": 12}, "name"),
        ({"id": 1, "name": "Phone", "quantity": -1, "brand": "Apple", "warranty_months": 12}, "quantity"),
        ({"id": 1, "name": "Phone", "quantity": 1, "brand": "", "warranty_months": 12}, "brand"),
        ({"id": 1, "name": "Phone", "quantity": 1, "brand": "Apple", "warranty_months": -6}, "warranty_months"),
    ],
)
def test_electronic_item_rejects_invalid_fields(kwargs, field_name) -> None:
    with pytest.raises(InvalidValueError) as exc_info:
        ElectronicItem(**kwargs)

    assert exc_info.value.field_name == field_name


def test_grocery_item_requires_a_date() -> None:
    with pytest.raises(InvalidValueError):
        GroceryItem(101, "Milk", 1, "2026-10-24")


def test_inventory_item_requires_aware_datetime() -> None:
    with pytest.raises(InvalidValueError):
        InventoryItem(1, "Cable", 1, datetime(2026, 10, 19, 8, 0))


@pytest.mark.parametrize("age", [-1, 151])
def test_patient_age_must_be_in_range(age) -> None:
    with pytest.raises(InvalidValueError):
        Patient(1, "John Doe", age, "Male")


def test_prescription_cannot_be_issued_in_the_future() -> None:
    tomorrow = datetime.now(pytz.utc) + timedelta(days=1)

    with pytest.raises(InvalidValueError):
        Prescription(101, 1, "Aspirin", tomorrow)


def test_to_dict_serializes_dates_as_iso_strings() -> None:
    item = GroceryItem(101, "Milk", 20, date(2026, 10, 24))

    assert item.to_dict() == {"id": 101, "name": "Milk", "quantity": 20, "expiry_date": "2026-10-24"}


def test_from_dict_requires_every_field() -> None:
    with pytest.raises(InvalidValueError) as exc_info:
        ElectronicItem.from_dict({"id": 1, "name": "Phone", "quantity": 1, "brand": "Apple"})

    assert exc_info.value.field_name == "warranty_months"


def test_from_dict_accepts_camel_case_keys() -> None:
    item = ElectronicItem.from_dict(
        {"id": 1, "name": "Phone", "quantity": 1, "brand": "Apple", "warrantyMonths": 24}
    )

    assert item.warranty_months == 24


def test_grocery_item_rejects_datetime_expiry() -> None:
    with pytest.raises(InvalidValueError) as exc_info:
        GroceryItem(1, "Milk", 2, datetime(2026, 10, 24, 9, 0, tzinfo=pytz.utc))

    assert exc_info.value.field_name == "expiry_date"
