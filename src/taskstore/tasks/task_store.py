# src/taskstore/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import datetime

from ..errors import TaskNotFoundError
from .task_models import ZERO_TIME, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store that can be shared between threads.

    State:
    - tasks: id -> Task
    - next_id: the id the next created task gets (starts at 0, never reused)

    Thread-safety:
    - a single lock per store, held for the whole body of every public method
    - no method calls another public method while holding it

    Tasks are frozen, so anything handed out (single tasks or snapshot lists)
    stays unaffected by later store mutations.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[int, Task] = {}
        self._next_id = 0
        logger.debug("TaskStore ready (empty)")

    # ---- public API ----

    def create_task(
        self,
        text: str,
        tags: Iterable[str] | None = None,
        due: datetime | None = None,
    ) -> int:
        """Store a new task and return its id. Inputs are taken as-is."""
        with self._lock:
            task = Task(
                id=self._next_id,
                text=text,
                tags=tuple(tags) if tags is not None else (),
                due=ZERO_TIME if due is None else due,
            )
            self._tasks[task.id] = task
            self._next_id += 1
        logger.debug("Task created id=%s tags=%s due=%s", task.id, task.tags, task.due)
        return task.id

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
        logger.debug("Task deleted id=%s", task_id)

    def delete_all_tasks(self) -> int:
        """Drop every task and return how many were removed. next_id keeps its high-water mark."""
        with self._lock:
            removed = len(self._tasks)
            self._tasks = {}
            next_id = self._next_id
        logger.debug("All tasks deleted count=%s next_id=%s", removed, next_id)
        return removed

    def get_all_tasks(self) -> list[Task]:
        """Snapshot of all tasks. Order is unspecified."""
        with self._lock:
            return list(self._tasks.values())

    def get_tasks_by_tag(self, tag: str) -> list[Task]:
        """
        Tasks having `tag` among their tags (exact, case-sensitive match).

        A task is included once even if the tag repeats in it.
        """
        with self._lock:
            return [task for task in self._tasks.values() if task.has_tag(tag)]

    def get_tasks_by_due_date(self, year: int, month: int, day: int) -> list[Task]:
        """Tasks due on the given calendar date, in each due timestamp's own timezone."""
        with self._lock:
            return [
                task
                for task in self._tasks.values()
                if task.due_date() == (year, month, day)
            ]

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id