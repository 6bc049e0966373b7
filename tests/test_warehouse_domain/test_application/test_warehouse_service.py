"""Tests for the Warehouse Application Service."""

from unittest.mock import Mock

import pytest

from src.common.exceptions.custom_exceptions import DuplicateKeyError, NotFoundError
from src.common.repositories.in_memory_keyed_repository import InMemoryKeyedRepository
from src.warehouse_domain.application.warehouse_service import WarehouseApplicationService


@pytest.fixture
def warehouse_service() -> WarehouseApplicationService:
    service = WarehouseApplicationService()
    service.seed_data()
    return service


def test_seed_data_loads_both_categories(warehouse_service) -> None:
    assert warehouse_service.electronics.count() == 3
    assert warehouse_service.groceries.count() == 3


def test_seed_data_twice_reports_failure(warehouse_service) -> None:
    assert warehouse_service.seed_data() is False
    assert warehouse_service.electronics.count() == 3


def test_increase_stock_updates_quantity(warehouse_service) -> None:
    assert warehouse_service.increase_stock(warehouse_service.electronics, 1, 10) is True

    assert warehouse_service.electronics.get(1).quantity == 35


def test_increase_stock_below_zero_is_rejected(warehouse_service) -> None:
    assert warehouse_service.increase_stock(warehouse_service.groceries, 102, -50) is False

    assert warehouse_service.groceries.get(102).quantity == 20


def test_increase_stock_unknown_id_is_reported(warehouse_service) -> None:
    assert warehouse_service.increase_stock(warehouse_service.electronics, 999, 5) is False


def test_remove_item_then_later_operations_continue(warehouse_service) -> None:
    assert warehouse_service.remove_item(warehouse_service.groceries, 999) is False
    assert warehouse_service.remove_item(warehouse_service.groceries, 103) is True
    assert warehouse_service.increase_stock(warehouse_service.groceries, 101, 5) is True

    assert [item.id for item in warehouse_service.groceries.get_all()] == [101, 102]
    assert warehouse_service.groceries.get(101).quantity == 55


def test_get_stock_statistics(warehouse_service) -> None:
    assert warehouse_service.get_stock_statistics() == {
        "electronic_items": 3,
        "grocery_items": 3,
        "electronic_units": 70,
        "grocery_units": 82,
    }


def test_increase_stock_uses_repository_contract(sample_electronic_item) -> None:
    # Arrange
    mock_repo = Mock(spec=InMemoryKeyedRepository)
    mock_repo.get.return_value = sample_electronic_item
    service = WarehouseApplicationService(electronics_repo=mock_repo, groceries_repo=Mock(spec=InMemoryKeyedRepository))

    # Act
    result = service.increase_stock(mock_repo, 1, 5)

    # Assert
    assert result is True
    mock_repo.get.assert_called_once_with(1)
    mock_repo.update_quantity.assert_called_once_with(1, 30)


def test_remove_item_not_found_skips_remove() -> None:
    mock_repo = Mock(spec=InMemoryKeyedRepository)
    mock_repo.get.side_effect = NotFoundError(42)
    service = WarehouseApplicationService(electronics_repo=mock_repo)

    assert service.remove_item(mock_repo, 42) is False
    mock_repo.remove.assert_not_called()


def test_seed_data_duplicate_error_is_logged(caplog) -> None:
    mock_repo = Mock(spec=InMemoryKeyedRepository)
    mock_repo.add.side_effect = DuplicateKeyError(1)
    service = WarehouseApplicationService(electronics_repo=mock_repo)

    assert service.seed_data() is False
    assert "Error seeding data" in caplog.text
