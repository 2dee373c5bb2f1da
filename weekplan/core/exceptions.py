"""
FILE: weekplan/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - WeekplanError (base exception)
  - TaskNotFoundError
  - BucketNotFoundError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from WeekplanError for easy catching
  - Exceptions include context (IDs, names) for helpful error messages
  - The store raises these only for contract violations (bad seed data,
    unknown bucket names, unknown form fields); user-level precondition
    failures are silent no-ops
  - UI layers catch and display
"""


class WeekplanError(Exception):
    """Base exception for all Weekplan errors."""
    pass


class TaskNotFoundError(WeekplanError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class BucketNotFoundError(WeekplanError):
    """Bucket with given name doesn't exist."""

    def __init__(self, bucket_name: str):
        self.bucket_name = bucket_name
        super().__init__(f"Bucket '{bucket_name}' not found")


class InvalidInputError(WeekplanError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
