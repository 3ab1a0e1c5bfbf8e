"""
Pydantic models for employee payloads and paged listings.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from recordkeeper.models.employee import EmployeeBasicDetails


class EmployeeBase(BaseModel):
    """Base model for employees"""
    first_name: str
    last_name: str = ""
    email: str = ""
    mobile: str = ""
    reporting_manager_name: str = ""
    department: str = ""


class EmployeeCreate(EmployeeBase):
    """Model for creating a new employee; an ID is generated when omitted"""
    id: Optional[str] = None


class EmployeeUpdate(BaseModel):
    """Model for updating an existing employee"""
    model_config = ConfigDict(frozen=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    reporting_manager_name: Optional[str] = None
    department: Optional[str] = None


class FilterCriteria(BaseModel):
    """Paging and filtering options for employee listings"""
    model_config = ConfigDict(frozen=True)

    page_number: int = Field(1, ge=1, description="1-based page number")
    page_size: int = Field(10, ge=1, description="Records per page")
    filter_attribute: Optional[str] = Field(
        None, description="Case-insensitive text matched against names, email, manager and department"
    )


class EmployeePage(BaseModel):
    """One page of employees"""
    page_number: int
    page_size: int
    total_records: int
    employees: List[EmployeeBasicDetails]

    @property
    def total_pages(self) -> int:
        return -(-self.total_records // self.page_size)
