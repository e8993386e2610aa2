from .api_client import ApiError, TaskApiClient
from .sync_controller import Phase, TaskForm, TaskListState, TaskSyncController

__all__ = [
    "ApiError",
    "TaskApiClient",
    "Phase",
    "TaskForm",
    "TaskListState",
    "TaskSyncController",
]
