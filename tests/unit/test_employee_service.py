"""Tests for the employee service."""

import pytest

from recordkeeper.schemas import EmployeeCreate, EmployeeUpdate, FilterCriteria
from recordkeeper.services import EmployeeService


def test_create_employee_with_id(employee_service):
    employee = employee_service.create_employee(
        EmployeeCreate(id="E006", first_name="Kofi", last_name="Mensah", email="kofi@example.com")
    )

    assert employee_service.get_employee("E006") is employee
    assert employee.full_name == "Kofi Mensah"


def test_create_employee_generates_id(settings):
    service = EmployeeService(settings=settings)

    first = service.create_employee(EmployeeCreate(first_name="A"))
    second = service.create_employee(EmployeeCreate(first_name="B"))

    assert first.id and second.id
    assert first.id != second.id
    assert service.get_employee(first.id) is first


def test_get_employee_is_exact(employee_service):
    assert employee_service.get_employee("E001").first_name == "Priya"
    assert employee_service.get_employee("e001") is None


def test_update_employee(employee_service):
    employee = employee_service.get_employee("E002")

    updated = employee_service.update_employee("E002", EmployeeUpdate(department="Finance", mobile="555-0102"))

    assert updated is employee
    assert (employee.department, employee.mobile) == ("Finance", "555-0102")
    assert employee.first_name == "Tom"


def test_update_missing_employee(employee_service):
    assert employee_service.update_employee("E999", EmployeeUpdate(first_name="Nobody")) is None


def test_delete_employee(employee_service):
    assert employee_service.delete_employee("E003") is True
    assert employee_service.get_employee("E003") is None
    assert employee_service.delete_employee("E003") is False


def test_list_employees_default_page(employee_service):
    page = employee_service.list_employees()

    assert (page.page_number, page.page_size, page.total_records) == (1, 10, 5)
    assert [e.id for e in page.employees] == ["E001", "E002", "E003", "E004", "E005"]


@pytest.mark.parametrize("page_number, expected", [
    (1, ["E001", "E002"]),
    (2, ["E003", "E004"]),
    (3, ["E005"]),
    (4, []),
])
def test_list_employees_pages(employee_service, page_number, expected):
    page = employee_service.list_employees(FilterCriteria(page_number=page_number, page_size=2))

    assert [e.id for e in page.employees] == expected
    assert page.total_records == 5
    assert page.total_pages == 3


def test_list_employees_filtered(employee_service):
    criteria = FilterCriteria(page_number=1, page_size=2, filter_attribute="engineering")

    page = employee_service.list_employees(criteria)

    assert page.total_records == 3
    assert [e.id for e in page.employees] == ["E002", "E003"]


def test_list_employees_filter_matches_manager(employee_service):
    page = employee_service.list_employees(FilterCriteria(filter_attribute="meera"))

    assert [e.id for e in page.employees] == ["E001"]


def test_list_employees_empty(settings):
    page = EmployeeService(settings=settings).list_employees()

    assert page.total_records == 0
    assert page.employees == []
    assert page.total_pages == 0
