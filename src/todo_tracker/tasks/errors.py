# src/todo_tracker/tasks/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for every error the tracker reports to the user."""


class EmptyTextError(TodoError, ValueError):
    def __init__(self) -> None:
        super().__init__("task text is empty")


class InvalidNumberError(TodoError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"not a valid task id: {raw!r}")
        self.raw = raw


class TaskNotFoundError(TodoError, KeyError):
    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"no task with id {self.task_id}"


class TaskLoadError(TodoError):
    """The storage file exists but could not be read or parsed."""


class TaskSaveError(TodoError):
    """Writing the storage file failed."""
