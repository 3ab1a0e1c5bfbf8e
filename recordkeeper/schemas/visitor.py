"""
Pydantic models for visitor payloads.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from recordkeeper.models.visitor import VisitorStatus


class VisitorBase(BaseModel):
    """Base model for visitors"""
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    company_name: str = ""
    purpose: str = ""
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None


class VisitorCreate(VisitorBase):
    """Model for registering a new visitor"""
    pass


class VisitorUpdate(BaseModel):
    """Model for updating an existing visitor"""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    company_name: Optional[str] = None
    purpose: Optional[str] = None
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None
    status: Optional[VisitorStatus] = None
