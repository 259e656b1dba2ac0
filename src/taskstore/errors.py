# src/taskstore/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for task store errors."""


class TaskNotFoundError(TaskStoreError, LookupError):
    """No task with the requested id exists at the time of the call."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task with id={task_id} not found")
