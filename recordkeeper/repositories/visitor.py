"""
Repository for Visitor records.

This module provides access methods for the visitor clearance register,
keyed by visitor ID.
"""

from typing import Iterable, List, Optional

from recordkeeper.models.visitor import Visitor, VisitorStatus
from recordkeeper.repositories.base import KeyedRepository


class VisitorRepository(KeyedRepository[int, Visitor]):
    """
    Repository for visitors.

    This class extends the KeyedRepository to provide status and text queries
    for the Visitor model. It also tracks the highest visitor ID ever
    inserted, so IDs handed out by next_id() are never reused, even after the
    visitor holding the highest ID is deleted.
    """

    def __init__(self, records: Optional[Iterable[Visitor]] = None, warn_on_duplicate_keys: bool = True):
        self._highest_id = 0
        super().__init__(Visitor, "id", records, warn_on_duplicate_keys)

    def insert(self, record: Visitor) -> Visitor:
        self._highest_id = max(self._highest_id, record.id)
        return super().insert(record)

    def update(self, key: int, data) -> Optional[Visitor]:
        visitor = super().update(key, data)
        if visitor is not None:
            self._highest_id = max(self._highest_id, visitor.id)
        return visitor

    def get_by_status(self, status: VisitorStatus) -> List[Visitor]:
        """
        Get all visitors with the given clearance status.

        Args:
            status (VisitorStatus): Status to filter on

        Returns:
            List[Visitor]: Matching visitors in registration order
        """
        return self.filter(lambda visitor: visitor.status == status)

    def next_id(self) -> int:
        """Return one more than the highest visitor ID ever inserted, starting at 1."""
        return self._highest_id + 1

    def search(self, query: str) -> List[Visitor]:
        """
        Search for visitors by name, email or company.

        Args:
            query (str): Case-insensitive search string

        Returns:
            List[Visitor]: List of matching visitors
        """
        needle = query.lower()
        return self.filter(
            lambda visitor: any(
                needle in value.lower()
                for value in (visitor.name, visitor.email, visitor.company_name)
            )
        )
