"""
In-memory, thread-safe task store.

Components:
- tasks/task_models.py: Task record + JSON-friendly (de)serialization
- tasks/task_store.py: lock-guarded TaskStore (create/get/delete/scan)
- errors.py: TaskNotFoundError
- cli/, connectors/: slash-command console that drives a TaskStore
"""

from .errors import TaskNotFoundError, TaskStoreError
from .tasks.task_models import ZERO_TIME, Task
from .tasks.task_store import TaskStore

__all__ = ["ZERO_TIME", "Task", "TaskNotFoundError", "TaskStore", "TaskStoreError"]
