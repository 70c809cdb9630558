# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from todo_tracker.tasks.errors import TaskSaveError
from todo_tracker.tasks.task_models import Task


class ScriptedInput:
    """
    Deterministic stand-in for input().

    - Returns the scripted lines in order
    - Records every prompt for assertions
    - Raises EOFError once the script runs out, like input() at end of stdin
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


class FakeTaskStore:
    """
    In-memory TaskRepo.

    Keeps the last saved snapshot; can be told to fail saves to exercise the
    SaveFailed path without touching the filesystem.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, fail_saves: bool = False) -> None:
        self.saved: list[Task] = list(tasks)
        self.save_calls = 0
        self.fail_saves = fail_saves

    @property
    def path(self) -> Path:
        return Path("memory://todos.db")

    def load(self) -> list[Task]:
        return list(self.saved)

    def save(self, tasks: Iterable[Task]) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise TaskSaveError("disk full")
        self.saved = list(tasks)
