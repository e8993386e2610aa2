"""
Client-side owner of the displayed task list.

Every mutation is followed by a fresh fetch of the list; nothing is inserted
or removed locally. The list lives in an explicit state container
(loading / ready / error) and each fetch carries a sequence number so that a
slow, older response can never replace the result of a newer one.
"""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from .api_client import ApiError, TaskApiClient

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class TaskListState:
    phase: Phase = Phase.LOADING
    tasks: List[Dict] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class TaskForm:
    title: str = ""
    description: str = ""

    def validate(self) -> Optional[str]:
        """Return an error message, or None when the form can be submitted."""
        if not self.title.strip():
            return "Title is required"
        if not self.description.strip():
            return "Description is required"
        return None

    def clear(self) -> None:
        self.title = ""
        self.description = ""


class TaskSyncController:
    def __init__(self, client: TaskApiClient, on_change: Callable[[TaskListState], None] = None):
        self.client = client
        self.state = TaskListState()
        # Last create/complete failure, shown next to the list
        self.notice: Optional[str] = None
        self._on_change = on_change
        self._lock = threading.Lock()
        self._seq = 0

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    def mount(self) -> TaskListState:
        return self.refresh()

    def refresh(self) -> TaskListState:
        with self._lock:
            self._seq += 1
            seq = self._seq
            self.state = TaskListState(Phase.LOADING, list(self.state.tasks))
        self._notify()

        try:
            tasks = self.client.list_tasks()
            fetched = TaskListState(Phase.READY, list(tasks))
        except ApiError as e:
            fetched = TaskListState(Phase.ERROR, [], e.message)

        with self._lock:
            if seq != self._seq:
                logger.debug("Dropping stale task list response seq=%s latest=%s", seq, self._seq)
                return self.state
            self.state = fetched
        self._notify()
        return self.state

    def submit(self, form: TaskForm) -> bool:
        """Create a task from the form. The form is cleared only on success."""
        problem = form.validate()
        if problem:
            self.notice = problem
            return False

        try:
            self.client.create_task(form.title.strip(), form.description.strip())
        except ApiError as e:
            self.notice = f"Could not add task: {e.message}"
            return False

        form.clear()
        self.notice = None
        self.refresh()
        return True

    def complete(self, task_id: int) -> bool:
        try:
            self.client.complete_task(task_id)
        except ApiError as e:
            self.notice = f"Could not complete task {task_id}: {e.message}"
            return False

        self.notice = None
        self.refresh()
        return True
