"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

import sys
import pytest
from pathlib import Path

# Add the project root directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from recordkeeper.models import EmployeeBasicDetails, Item, Visitor, VisitorStatus
from recordkeeper.repositories import EmployeeRepository, InventoryRepository, TaskRepository, VisitorRepository
from recordkeeper.services import EmployeeService, InventoryService, TaskService, VisitorService
from recordkeeper.utils.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def task_repository():
    """Empty task repository."""
    return TaskRepository()


@pytest.fixture
def inventory_repository():
    """Inventory repository with a few items."""
    return InventoryRepository([
        Item(id=1, name="Widget", price=2.5, quantity=10),
        Item(id=2, name="Gadget", price=12.0, quantity=0),
        Item(id=3, name="Sprocket", price=0.75, quantity=250),
    ])


@pytest.fixture
def visitor_repository():
    """Visitor repository with one visitor in each status."""
    return VisitorRepository([
        Visitor(id=1, name="Ada Lovelace", email="ada@example.com", company_name="Analytical"),
        Visitor(id=2, name="Alan Turing", email="alan@example.com", status=VisitorStatus.APPROVED),
        Visitor(id=3, name="Grace Hopper", company_name="Navy", status=VisitorStatus.REJECTED),
    ])


@pytest.fixture
def task_service(task_repository, settings):
    return TaskService(repository=task_repository, settings=settings)


@pytest.fixture
def inventory_service(inventory_repository, settings):
    return InventoryService(repository=inventory_repository, settings=settings)


@pytest.fixture
def visitor_service(visitor_repository, settings):
    return VisitorService(repository=visitor_repository, settings=settings)


@pytest.fixture
def employee_repository():
    """Employee repository with five employees across two departments."""
    return EmployeeRepository([
        EmployeeBasicDetails(id="E001", first_name="Priya", last_name="Shah", department="Finance",
                             reporting_manager_name="Meera Iyer"),
        EmployeeBasicDetails(id="E002", first_name="Tom", last_name="Baker", department="Engineering"),
        EmployeeBasicDetails(id="E003", first_name="Lena", last_name="Fischer", department="Engineering",
                             email="lena@example.com"),
        EmployeeBasicDetails(id="E004", first_name="Omar", last_name="Haddad", department="Finance"),
        EmployeeBasicDetails(id="E005", first_name="Sara", last_name="Lind", department="Engineering"),
    ])


@pytest.fixture
def employee_service(employee_repository, settings):
    return EmployeeService(repository=employee_repository, settings=settings)
