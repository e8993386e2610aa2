from .task_service import RECENT_LIMIT, TaskService
from .task_store import TaskStore

__all__ = ["RECENT_LIMIT", "TaskService", "TaskStore"]
