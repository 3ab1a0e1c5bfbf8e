from pydantic import BaseModel, ConfigDict, Field


class EmployeeBasicDetails(BaseModel):
    """
    Basic details of an employee.

    Employees are addressed by a string ID.

    Attributes:
        id (str): Employee ID, used as its key
        first_name (str): Given name
        last_name (str): Family name
        email (str): Work email
        mobile (str): Phone number
        reporting_manager_name (str): Name of the employee's manager
        department (str): Department the employee works in
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., description="Employee ID")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field("", description="Family name")
    email: str = Field("", description="Work email")
    mobile: str = Field("", description="Phone number")
    reporting_manager_name: str = Field("", description="Name of the reporting manager")
    department: str = Field("", description="Department")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
