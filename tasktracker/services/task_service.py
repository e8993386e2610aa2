# tasktracker/services/task_service.py

import logging
from typing import List

from ..errors import NotFoundError, ValidationError
from ..models.task import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


def _clean(value) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


class TaskService:
    """Validation and listing policy in front of the task store."""

    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, title, description) -> Task:
        """
        Validate and store a new pending task.

        Both fields are required; they are stored trimmed. Nothing touches
        the store until validation has passed.
        """
        title = _clean(title)
        description = _clean(description)
        if not title:
            raise ValidationError("Title is required")
        if not description:
            raise ValidationError("Description is required")

        task = self.store.insert(title, description)
        logger.info("Task created id=%s", task.id)
        return task

    def list_recent_pending(self) -> List[Task]:
        return self.store.list_pending(RECENT_LIMIT)

    def complete_task(self, task_id: int) -> None:
        """Mark a task done. Completing an already-completed task is a no-op success."""
        if not self.store.mark_done(task_id):
            raise NotFoundError()
        logger.info("Task completed id=%s", task_id)
