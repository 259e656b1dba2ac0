# src/taskstore/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console layer.

Commands depend on this Protocol instead of the concrete TaskStore,
so a different store (or a fake in tests) can be injected.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def create_task(
            self,
            text: str,
            tags: Iterable[str] | None = None,
            due: datetime | None = None,
    ) -> int: ...

    def get_task(self, task_id: int) -> Task: ...
    def delete_task(self, task_id: int) -> None: ...
    def delete_all_tasks(self) -> int: ...

    def get_all_tasks(self) -> list[Task]: ...
    def get_tasks_by_tag(self, tag: str) -> list[Task]: ...
    def get_tasks_by_due_date(self, year: int, month: int, day: int) -> list[Task]: ...

    def count_tasks(self) -> int: ...

    @property
    def next_id(self) -> int: ...
