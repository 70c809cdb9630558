# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The shell depends on Protocols instead of concrete implementations, so tests
can swap in a store that fails on demand.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Durable round-trip of the whole task list."""

    @property
    def path(self) -> Path: ...

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
