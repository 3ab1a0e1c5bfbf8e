"""
This package contains repository implementations for record storage.

Repositories provide a clean abstraction layer over the in-memory record
collections, implementing the repository pattern to separate business logic
from data access concerns.
"""

from recordkeeper.repositories.base import KeyedRepository
from recordkeeper.repositories.task import TaskRepository
from recordkeeper.repositories.inventory import InventoryRepository
from recordkeeper.repositories.visitor import VisitorRepository
from recordkeeper.repositories.employee import EmployeeRepository

__all__ = [
    'KeyedRepository',
    'TaskRepository',
    'InventoryRepository',
    'VisitorRepository',
    'EmployeeRepository'
]
