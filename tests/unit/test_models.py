"""
Tests for record models and payload schemas.
"""

import pytest
from pydantic import ValidationError

from recordkeeper.models import EmployeeBasicDetails, Item, Task, Visitor, VisitorStatus
from recordkeeper.schemas import EmployeePage, FilterCriteria, ItemCreate, TaskUpdate, VisitorCreate, VisitorUpdate


def test_item_display_line():
    item = Item(id=3, name="Sprocket", price=0.75, quantity=250)

    assert str(item) == "ID: 3, Name: Sprocket, Price: 0.75, Quantity: 250"


def test_item_assignment_is_validated():
    item = Item(id=1, name="Widget", price=2.5, quantity=10)

    with pytest.raises(ValidationError):
        item.quantity = "lots"


def test_item_create_rejects_bad_types():
    with pytest.raises(ValidationError):
        ItemCreate(id="one", name="Widget", price=2.5, quantity=10)


def test_visitor_defaults_to_pending():
    visitor = Visitor(id=1, name="Ada")

    assert visitor.status == VisitorStatus.PENDING
    assert visitor.entry_time is None


def test_update_payloads_are_immutable():
    payload = TaskUpdate(title="New")

    with pytest.raises(ValidationError):
        payload.title = "Other"


def test_update_payload_tracks_set_fields():
    payload = VisitorUpdate(status=VisitorStatus.APPROVED)

    assert payload.model_dump(exclude_unset=True) == {"status": VisitorStatus.APPROVED}


def test_visitor_create_has_no_id_or_status():
    payload = VisitorCreate(name="Ada")

    assert "id" not in payload.model_dump()
    assert "status" not in payload.model_dump()


def test_task_serializes_to_json():
    assert Task(title="Buy milk").model_dump_json() == '{"title":"Buy milk"}'


def test_item_display_whole_number_price():
    """Whole-number prices are shown without a decimal part."""
    item = Item(id=4, name="Hammer", price=10.0, quantity=2)

    assert str(item) == "ID: 4, Name: Hammer, Price: 10, Quantity: 2"


def test_employee_full_name():
    assert EmployeeBasicDetails(id="E1", first_name="Priya", last_name="Shah").full_name == "Priya Shah"
    assert EmployeeBasicDetails(id="E2", first_name="Cher").full_name == "Cher"


def test_filter_criteria_validation():
    with pytest.raises(ValidationError):
        FilterCriteria(page_number=0)
    with pytest.raises(ValidationError):
        FilterCriteria(page_size=0)


def test_employee_page_total_pages():
    page = EmployeePage(page_number=1, page_size=2, total_records=5, employees=[])

    assert page.total_pages == 3
