# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"


class TaskFilter(StrEnum):
    """Which tasks a listing shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - id is assigned once by TaskList.add and never renumbered.
    - created_at is a naive local timestamp; it is never changed after creation.
    """

    id: int
    text: str
    completed: bool
    created_at: datetime

    @property
    def is_active(self) -> bool:
        return not self.completed

    def with_completed(self, done: bool) -> Task:
        return replace(self, completed=done)

    def created_display(self) -> str:
        return self.created_at.strftime(DISPLAY_TIME_FORMAT)
