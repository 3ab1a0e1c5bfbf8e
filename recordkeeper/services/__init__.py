"""
Services expressing record-keeping operations in domain terms.
"""

from recordkeeper.services.task_service import TaskService
from recordkeeper.services.inventory_service import InventoryService
from recordkeeper.services.visitor_service import VisitorService
from recordkeeper.services.employee_service import EmployeeService

__all__ = ['TaskService', 'InventoryService', 'VisitorService', 'EmployeeService']
