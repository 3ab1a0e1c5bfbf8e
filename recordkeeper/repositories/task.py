"""
Repository for Task records, keyed by title.
"""

from typing import Iterable, List, Optional

from recordkeeper.models.task import Task
from recordkeeper.repositories.base import KeyedRepository


class TaskRepository(KeyedRepository[str, Task]):
    """Task list keyed by the task title."""

    def __init__(self, records: Optional[Iterable[Task]] = None, warn_on_duplicate_keys: bool = True):
        super().__init__(Task, "title", records, warn_on_duplicate_keys)

    def search(self, query: str) -> List[Task]:
        """Case-insensitive substring search over task titles."""
        needle = query.lower()
        return self.filter(lambda task: needle in task.title.lower())
