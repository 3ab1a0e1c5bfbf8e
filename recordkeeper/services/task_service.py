"""
Service for managing a task list.
This module handles the logic for:
- Creating tasks
- Listing tasks
- Renaming tasks by title
- Deleting tasks by title
"""

import logging
from typing import List, Optional

from recordkeeper.models.task import Task
from recordkeeper.repositories.task import TaskRepository
from recordkeeper.schemas.task import TaskCreate, TaskUpdate
from recordkeeper.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

class TaskService:
    """Service for managing tasks addressed by title."""

    def __init__(self, repository: Optional[TaskRepository] = None, settings: Optional[Settings] = None):
        """Initialize the service.

        Args:
            repository: Task repository to use; a new empty one if omitted
            settings: Application settings; defaults to get_settings()
        """
        settings = settings or get_settings()
        self.repository = repository if repository is not None else TaskRepository(
            warn_on_duplicate_keys=settings.WARN_ON_DUPLICATE_KEYS
        )

    def create_task(self, title: str) -> Task:
        """
        Add a task to the end of the list.

        Args:
            title: Title of the new task

        Returns:
            The created Task
        """
        task = self.repository.create(TaskCreate(title=title))
        logger.info(f"Task added: {title!r}")
        return task

    def list_tasks(self) -> List[Task]:
        """Return all tasks in the order they were added."""
        tasks = self.repository.get_all()
        if not tasks:
            logger.debug("No tasks available")
        return tasks

    def get_task(self, title: str) -> Optional[Task]:
        return self.repository.get_by_key(title)

    def update_task(self, title: str, new_title: str) -> Optional[Task]:
        """
        Rename the first task with the given title.

        Args:
            title: Current title of the task
            new_title: Title to set

        Returns:
            The updated Task, or None if no task has that title
        """
        task = self.repository.update(title, TaskUpdate(title=new_title))
        if task is None:
            logger.warning(f"Task not found: {title!r}")
            return None
        logger.info(f"Task updated: {title!r} -> {new_title!r}")
        return task

    def delete_task(self, title: str) -> bool:
        """
        Delete the first task with the given title.

        Returns:
            True if a task was deleted, False if none matched
        """
        if not self.repository.delete(title):
            logger.warning(f"Task not found: {title!r}")
            return False
        logger.info(f"Task deleted: {title!r}")
        return True
