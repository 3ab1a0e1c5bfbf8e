"""
Repository for inventory Item records.

This module provides data access methods for inventory items, keyed by their
integer item ID.
"""

from typing import Iterable, List, Optional

from recordkeeper.models.item import Item
from recordkeeper.repositories.base import KeyedRepository


class InventoryRepository(KeyedRepository[int, Item]):
    """
    Repository for inventory items.

    This class extends the KeyedRepository to provide specific query methods
    for the Item model.
    """

    def __init__(self, records: Optional[Iterable[Item]] = None, warn_on_duplicate_keys: bool = True):
        """
        Initialize the repository.

        Args:
            records (Iterable[Item]): Optional initial items
            warn_on_duplicate_keys (bool): Warn when an item ID is reused
        """
        super().__init__(Item, "id", records, warn_on_duplicate_keys)

    def in_stock(self) -> List[Item]:
        """
        Get all items with a positive quantity.

        Returns:
            List[Item]: Items that can currently be supplied
        """
        return self.filter(lambda item: item.quantity > 0)

    def search(self, query: str) -> List[Item]:
        """
        Search for items by name.

        Args:
            query (str): Case-insensitive substring of the item name

        Returns:
            List[Item]: List of matching items
        """
        needle = query.lower()
        return self.filter(lambda item: needle in item.name.lower())
