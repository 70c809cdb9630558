# src/todo_tracker/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

from .errors import EmptyTextError, TaskNotFoundError
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered in-memory task container.

    Nothing here touches disk: callers save through TaskStore after each
    successful mutation. Tasks are immutable, so toggling swaps in a new value
    found by id rather than editing a record in place.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def active_count(self) -> int:
        return sum(1 for t in self._tasks if not t.completed)

    def next_id(self) -> int:
        # max + 1, not a counter: a freed id comes back once every higher id is gone.
        return max((t.id for t in self._tasks), default=0) + 1

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    # ---- operations ----

    def add(self, text: str, *, now: datetime | None = None) -> Task:
        clean = (text or "").strip()
        if not clean:
            raise EmptyTextError()

        task = Task(
            id=self.next_id(),
            text=clean,
            completed=False,
            created_at=now if now is not None else datetime.now(),
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return task

    def list_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        return [t for t in self._tasks if task_filter.matches(t)]

    def toggle(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        current = self._tasks[idx]
        updated = current.with_completed(not current.completed)
        self._tasks[idx] = updated
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated

    def delete(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        removed = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s", task_id)
        return removed

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        logger.debug("Cleared completed tasks: %d", removed)
        return removed
