"""
recordkeeper: in-memory keyed repositories for small record-keeping apps.
"""

from recordkeeper.exceptions import RecordError, RecordNotFoundError
from recordkeeper.repositories import (
    EmployeeRepository,
    InventoryRepository,
    KeyedRepository,
    TaskRepository,
    VisitorRepository,
)
from recordkeeper.services import EmployeeService, InventoryService, TaskService, VisitorService

__version__ = "0.1.0"

__all__ = [
    'EmployeeRepository',
    'EmployeeService',
    'InventoryRepository',
    'InventoryService',
    'KeyedRepository',
    'RecordError',
    'RecordNotFoundError',
    'TaskRepository',
    'TaskService',
    'VisitorRepository',
    'VisitorService',
]
