"""
This package contains Pydantic models for create/update payloads.
"""

from recordkeeper.schemas.task import TaskCreate, TaskUpdate
from recordkeeper.schemas.item import ItemCreate, ItemUpdate
from recordkeeper.schemas.visitor import VisitorCreate, VisitorUpdate
from recordkeeper.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeePage,
    FilterCriteria
)

__all__ = [
    'TaskCreate',
    'TaskUpdate',
    'ItemCreate',
    'ItemUpdate',
    'VisitorCreate',
    'VisitorUpdate',
    'EmployeeCreate',
    'EmployeeUpdate',
    'EmployeePage',
    'FilterCriteria'
]
