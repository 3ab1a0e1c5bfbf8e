"""Tests for the inventory service."""

import pytest
from pydantic import ValidationError

from recordkeeper.services import InventoryService


def test_add_item(inventory_service):
    item = inventory_service.add_item(4, "Flange", 3.2, 7)

    assert inventory_service.find_item(4) is item
    assert [i.id for i in inventory_service.list_items()] == [1, 2, 3, 4]


def test_add_item_rejects_bad_input(inventory_service):
    with pytest.raises(ValidationError):
        inventory_service.add_item(5, "Flange", "cheap", 7)

    assert inventory_service.find_item(5) is None


def test_find_item(inventory_service):
    assert inventory_service.find_item(1).name == "Widget"
    assert inventory_service.find_item(42) is None


def test_describe_item(inventory_service):
    assert inventory_service.describe_item(1) == "ID: 1, Name: Widget, Price: 2.5, Quantity: 10"
    assert inventory_service.describe_item(42) is None


def test_update_item_overwrites_all_fields(inventory_service):
    item = inventory_service.find_item(2)

    updated = inventory_service.update_item(2, "Gadget Pro", 15.5, 3)

    assert updated is item
    assert (item.name, item.price, item.quantity) == ("Gadget Pro", 15.5, 3)


def test_update_missing_item(inventory_service):
    before = [item.model_dump() for item in inventory_service.list_items()]

    assert inventory_service.update_item(42, "Ghost", 1.0, 1) is None
    assert [item.model_dump() for item in inventory_service.list_items()] == before


def test_delete_item(inventory_service):
    assert inventory_service.delete_item(2) is True
    assert [item.id for item in inventory_service.list_items()] == [1, 3]
    assert inventory_service.delete_item(2) is False


def test_list_items_empty(settings):
    assert InventoryService(settings=settings).list_items() == []
