from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """
    Model for an inventory item.

    Attributes:
        id (int): Item ID, used as its key
        name (str): Item name
        price (float): Unit price
        quantity (int): Units on hand
    """
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., description="Item ID")
    name: str = Field(..., description="Item name")
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., description="Units on hand")

    def __str__(self) -> str:
        # Whole-number prices print without a trailing ".0"
        price = int(self.price) if self.price.is_integer() else self.price
        return f"ID: {self.id}, Name: {self.name}, Price: {price}, Quantity: {self.quantity}"
