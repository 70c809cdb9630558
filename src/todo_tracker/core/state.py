# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    store: TaskRepo
    task_list: TaskList

    # Set by bootstrap when the storage file could not be loaded.
    load_warning: str | None = None

    def save(self) -> None:
        """Persist the current list. Raises TaskSaveError."""
        self.store.save(self.task_list.tasks)
