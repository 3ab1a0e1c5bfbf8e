"""
Service for managing an inventory of items keyed by integer ID.
"""

import logging
from typing import List, Optional

from recordkeeper.models.item import Item
from recordkeeper.repositories.inventory import InventoryRepository
from recordkeeper.schemas.item import ItemCreate, ItemUpdate
from recordkeeper.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

class InventoryService:
    """Service for adding, finding, updating and deleting inventory items."""

    def __init__(self, repository: Optional[InventoryRepository] = None, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.repository = repository if repository is not None else InventoryRepository(
            warn_on_duplicate_keys=settings.WARN_ON_DUPLICATE_KEYS
        )

    def add_item(self, item_id: int, name: str, price: float, quantity: int) -> Item:
        """
        Add an item to the inventory.

        Args:
            item_id: Item ID
            name: Item name
            price: Unit price
            quantity: Units on hand

        Returns:
            The created Item

        Raises:
            pydantic.ValidationError: If a value has the wrong type
        """
        item = self.repository.create(ItemCreate(id=item_id, name=name, price=price, quantity=quantity))
        logger.info(f"Item added: {item}")
        return item

    def list_items(self) -> List[Item]:
        """Return all items in the order they were added."""
        items = self.repository.get_all()
        if not items:
            logger.debug("No items in the inventory")
        return items

    def find_item(self, item_id: int) -> Optional[Item]:
        return self.repository.get_by_key(item_id)

    def describe_item(self, item_id: int) -> Optional[str]:
        """Return the display line for an item, or None if it does not exist."""
        item = self.find_item(item_id)
        if item is None:
            logger.warning(f"Item not found: {item_id}")
            return None
        return str(item)

    def update_item(self, item_id: int, name: str, price: float, quantity: int) -> Optional[Item]:
        """
        Overwrite the name, price and quantity of an item.

        Returns:
            The updated Item, or None if no item has that ID
        """
        item = self.repository.update(item_id, ItemUpdate(name=name, price=price, quantity=quantity))
        if item is None:
            logger.warning(f"Item not found: {item_id}")
            return None
        logger.info(f"Item updated: {item}")
        return item

    def delete_item(self, item_id: int) -> bool:
        if not self.repository.delete(item_id):
            logger.warning(f"Item not found: {item_id}")
            return False
        logger.info(f"Item deleted: {item_id}")
        return True
