"""
Error taxonomy shared by the service and the HTTP layer.
"""


class TaskError(Exception):
    """Base class for task failures that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
        self.message = message


class ValidationError(TaskError):
    """Client-supplied data violates a required-field rule."""

    status_code = 400


class NotFoundError(TaskError):
    """The referenced task id does not exist."""

    status_code = 404

    def __init__(self, message: str = "Task not found"):
        super().__init__(message)


class StorageError(TaskError):
    """The underlying persistence call failed."""

    status_code = 500
