from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VisitorStatus(str, Enum):
    """Clearance status of a visitor."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Visitor(BaseModel):
    """
    Model for a visitor awaiting or holding security clearance.

    New visitors always start out as ``pending``; approval and rejection are
    ordinary updates of the ``status`` field.

    Attributes:
        id (int): Visitor ID, used as its key
        name (str): Full name of the visitor
        email (str): Contact email
        phone (str): Contact phone number
        address (str): Postal address
        company_name (str): Company the visitor represents
        purpose (str): Purpose of the visit
        entry_time (datetime): When the visitor entered, if they have
        exit_time (datetime): When the visitor left, if they have
        status (VisitorStatus): Current clearance status
    """
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., description="Visitor ID")
    name: str = Field(..., description="Full name of the visitor")
    email: str = Field("", description="Contact email")
    phone: str = Field("", description="Contact phone number")
    address: str = Field("", description="Postal address")
    company_name: str = Field("", description="Company the visitor represents")
    purpose: str = Field("", description="Purpose of the visit")
    entry_time: Optional[datetime] = Field(None, description="Entry timestamp")
    exit_time: Optional[datetime] = Field(None, description="Exit timestamp")
    status: VisitorStatus = Field(VisitorStatus.PENDING, description="Clearance status")
