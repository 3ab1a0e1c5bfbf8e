"""
Service for the visitor security clearance register.
This module handles the logic for:
- Registering visitors (always starting as pending)
- Looking visitors up by ID or by clearance status
- Updating visitor details and status
- Removing visitors
"""

import logging
from typing import List, Optional

from recordkeeper.models.visitor import Visitor, VisitorStatus
from recordkeeper.repositories.visitor import VisitorRepository
from recordkeeper.schemas.visitor import VisitorCreate, VisitorUpdate
from recordkeeper.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

class VisitorService:
    """Service for managing visitors and their clearance status."""

    def __init__(self, repository: Optional[VisitorRepository] = None, settings: Optional[Settings] = None):
        """Initialize the service.

        Args:
            repository: Visitor repository to use; a new empty one if omitted
            settings: Application settings; defaults to get_settings()
        """
        settings = settings or get_settings()
        self.repository = repository if repository is not None else VisitorRepository(
            warn_on_duplicate_keys=settings.WARN_ON_DUPLICATE_KEYS
        )

    def create_visitor(self, data: VisitorCreate) -> Visitor:
        """
        Register a new visitor.

        The visitor is given the next sequential ID and a ``pending`` status
        regardless of what the caller supplied.

        Args:
            data: Visitor details

        Returns:
            The created Visitor
        """
        visitor = self.repository.create(
            {**data.model_dump(), "id": self.repository.next_id(), "status": VisitorStatus.PENDING}
        )
        logger.info(f"Visitor registered: id={visitor.id} name={visitor.name!r}")
        return visitor

    def get_visitor(self, visitor_id: int) -> Optional[Visitor]:
        return self.repository.get_by_key(visitor_id)

    def get_visitors_by_status(self, status: VisitorStatus) -> List[Visitor]:
        return self.repository.get_by_status(status)

    def update_visitor(self, visitor_id: int, data: VisitorUpdate) -> Optional[Visitor]:
        """
        Update the fields set on ``data`` for a visitor.

        Returns:
            The updated Visitor, or None if no visitor has that ID
        """
        visitor = self.repository.update(visitor_id, data)
        if visitor is None:
            logger.warning(f"Visitor not found: {visitor_id}")
            return None
        logger.info(f"Visitor updated: id={visitor_id} status={visitor.status.value}")
        return visitor

    def delete_visitor(self, visitor_id: int) -> bool:
        """
        Remove a visitor from the register.

        Returns:
            True if deleted, False if not found
        """
        if not self.repository.delete(visitor_id):
            logger.warning(f"Visitor not found: {visitor_id}")
            return False
        logger.info(f"Visitor deleted: {visitor_id}")
        return True
