"""
Pydantic models for inventory item payloads.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class ItemBase(BaseModel):
    """Base model for inventory items"""
    name: str
    price: float
    quantity: int


class ItemCreate(ItemBase):
    """Model for adding a new item"""
    id: int


class ItemUpdate(BaseModel):
    """Model for updating an existing item"""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
