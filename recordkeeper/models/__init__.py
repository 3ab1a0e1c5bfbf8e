"""
This package contains the record models held by the repositories.
"""

from recordkeeper.models.task import Task
from recordkeeper.models.item import Item
from recordkeeper.models.visitor import Visitor, VisitorStatus
from recordkeeper.models.employee import EmployeeBasicDetails

__all__ = ['Task', 'Item', 'Visitor', 'VisitorStatus', 'EmployeeBasicDetails']
