"""
Repository for employee records, keyed by string employee ID.
"""

from typing import Iterable, List, Optional

from recordkeeper.models.employee import EmployeeBasicDetails
from recordkeeper.repositories.base import KeyedRepository


class EmployeeRepository(KeyedRepository[str, EmployeeBasicDetails]):
    """
    Repository for employees.

    This class extends the KeyedRepository with a text search over the fields
    an employee listing is filtered on.
    """

    def __init__(
        self,
        records: Optional[Iterable[EmployeeBasicDetails]] = None,
        warn_on_duplicate_keys: bool = True,
    ):
        super().__init__(EmployeeBasicDetails, "id", records, warn_on_duplicate_keys)

    def search(self, query: str) -> List[EmployeeBasicDetails]:
        """
        Search for employees by name, email, manager or department.

        Args:
            query (str): Case-insensitive search string

        Returns:
            List[EmployeeBasicDetails]: Matching employees in insertion order
        """
        needle = query.lower()
        return self.filter(
            lambda employee: any(
                needle in value.lower()
                for value in (
                    employee.full_name,
                    employee.email,
                    employee.reporting_manager_name,
                    employee.department,
                )
            )
        )
