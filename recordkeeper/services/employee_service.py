"""
Service for managing employee basic details.
This module handles the logic for:
- Creating employees (generating an ID when none is given)
- Looking employees up by ID
- Updating and deleting employees
- Listing employees one page at a time, optionally filtered
"""

import logging
import uuid
from typing import Optional

from recordkeeper.models.employee import EmployeeBasicDetails
from recordkeeper.repositories.employee import EmployeeRepository
from recordkeeper.schemas.employee import EmployeeCreate, EmployeePage, EmployeeUpdate, FilterCriteria
from recordkeeper.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

class EmployeeService:
    """Service for employee CRUD and paged listings."""

    def __init__(self, repository: Optional[EmployeeRepository] = None, settings: Optional[Settings] = None):
        """Initialize the service.

        Args:
            repository: Employee repository to use; a new empty one if omitted
            settings: Application settings; defaults to get_settings()
        """
        settings = settings or get_settings()
        self.repository = repository if repository is not None else EmployeeRepository(
            warn_on_duplicate_keys=settings.WARN_ON_DUPLICATE_KEYS
        )

    def create_employee(self, data: EmployeeCreate) -> EmployeeBasicDetails:
        """
        Create a new employee.

        Args:
            data: Employee details; ``id`` is generated when not supplied

        Returns:
            The created employee
        """
        employee_id = data.id or uuid.uuid4().hex
        employee = self.repository.create({**data.model_dump(), "id": employee_id})
        logger.info(f"Employee created: id={employee.id} name={employee.full_name!r}")
        return employee

    def get_employee(self, employee_id: str) -> Optional[EmployeeBasicDetails]:
        return self.repository.get_by_key(employee_id)

    def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Optional[EmployeeBasicDetails]:
        """
        Update the fields set on ``data`` for an employee.

        Returns:
            The updated employee, or None if no employee has that ID
        """
        employee = self.repository.update(employee_id, data)
        if employee is None:
            logger.warning(f"Employee not found: {employee_id!r}")
            return None
        logger.info(f"Employee updated: id={employee_id}")
        return employee

    def delete_employee(self, employee_id: str) -> bool:
        """
        Delete an employee.

        Returns:
            True if deleted, False if not found
        """
        if not self.repository.delete(employee_id):
            logger.warning(f"Employee not found: {employee_id!r}")
            return False
        logger.info(f"Employee deleted: {employee_id}")
        return True

    def list_employees(self, criteria: Optional[FilterCriteria] = None) -> EmployeePage:
        """
        Return one page of employees in insertion order.

        When ``criteria.filter_attribute`` is set, only employees matching it
        are counted and paged.

        Args:
            criteria: Page number, page size and optional filter text

        Returns:
            EmployeePage with the requested slice and the total record count
        """
        criteria = criteria or FilterCriteria()
        skip = (criteria.page_number - 1) * criteria.page_size

        if criteria.filter_attribute:
            matches = self.repository.search(criteria.filter_attribute)
            total = len(matches)
            employees = matches[skip:skip + criteria.page_size]
        else:
            total = len(self.repository)
            employees = self.repository.get_all(skip=skip, limit=criteria.page_size)

        return EmployeePage(
            page_number=criteria.page_number,
            page_size=criteria.page_size,
            total_records=total,
            employees=employees
        )
