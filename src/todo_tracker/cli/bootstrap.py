# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the flat-file TaskStore into AppState,
- performs the initial load, recovering from a corrupt file with an empty list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.errors import TaskLoadError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

LOAD_WARNING = "Failed to read the storage file. Starting with an empty list."


def load_task_list(store: TaskRepo) -> tuple[TaskList, str | None]:
    """
    Load tasks from the store.

    A corrupt or unreadable file never aborts startup: everything read so far is
    discarded and an empty list is returned together with a user-facing warning.
    """
    try:
        return TaskList(store.load()), None
    except TaskLoadError:
        logger.warning("Storage file %s unreadable; starting with an empty list.", store.path)
        return TaskList(), LOAD_WARNING


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if store is None:
        store = TaskStore(settings.storage_path)

    task_list, warning = load_task_list(store)
    return AppState(
        settings=settings,
        store=store,
        task_list=task_list,
        load_warning=warning,
    )
