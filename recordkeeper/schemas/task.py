"""
Pydantic models for task payloads.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class TaskCreate(BaseModel):
    """Model for creating a new task"""
    title: str


class TaskUpdate(BaseModel):
    """Model for updating an existing task"""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
