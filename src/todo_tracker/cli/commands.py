# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import (
    EmptyTextError,
    InvalidNumberError,
    TaskNotFoundError,
    TaskSaveError,
)
from ..tasks.task_models import Task, TaskFilter

Prompt = Callable[[str], str]
CommandHandler = Callable[[AppState, Prompt], str]

logger = logging.getLogger(__name__)

EXIT_CHOICE = "0"
INVALID_INPUT = "Invalid input."

_ID_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class MenuEntry:
    choice: str
    label: str
    handler: CommandHandler


class MenuRegistry:
    """Numbered menu used by the console connector (1 = add, 0 = exit, ...)."""

    def __init__(self, title: str = "TODO LIST") -> None:
        self.title = title
        self._entries: dict[str, MenuEntry] = {}

    def register(self, choice: str, handler: CommandHandler, label: str) -> None:
        self._entries[choice] = MenuEntry(choice=choice, label=label, handler=handler)

    def handle(self, state: AppState, choice: str, ask: Prompt) -> str:
        """
        Run the handler for a menu choice such as "3".
        Returns the text to show the user.
        """
        entry = self._entries.get(choice.strip())
        if entry is None:
            return INVALID_INPUT
        return entry.handler(state, ask)

    def build_menu(self, state: AppState) -> str:
        tasks = state.task_list
        lines = [
            f"==== {self.title} ====",
            f"Total: {len(tasks)} | Remaining: {tasks.active_count}",
        ]
        # Exit goes last, as on the printed menu.
        ordered = sorted(self._entries.values(), key=lambda e: (e.choice == EXIT_CHOICE, e.choice))
        for entry in ordered:
            lines.append(f"{entry.choice}) {entry.label}")
        return "\n".join(lines)


registry = MenuRegistry()


# ---- helpers ----

def parse_task_id(raw: str) -> int:
    """Parse a user-typed id. Non-numeric or negative input raises InvalidNumberError."""
    s = (raw or "").strip()
    if not _ID_RE.fullmatch(s):
        raise InvalidNumberError(s)
    value = int(s)
    if value < 0:
        raise InvalidNumberError(s)
    return value


def format_task(task: Task) -> str:
    status = "[done]" if task.completed else "[open]"
    return f"{task.id}. {status} {task.text} ({task.created_display()})"


def _save_and_report(state: AppState, message: str) -> str:
    try:
        state.save()
    except TaskSaveError as e:
        return f"{message}\nSave failed: {e}"
    return message


# ---- handlers ----

def cmd_add(state: AppState, ask: Prompt) -> str:
    text = ask("Task text > ")
    try:
        task = state.task_list.add(text)
    except EmptyTextError:
        return "Empty text cannot be added."
    return _save_and_report(state, f"Added #{task.id}.")


def _make_list_handler(task_filter: TaskFilter) -> CommandHandler:
    def cmd_list(state: AppState, ask: Prompt) -> str:
        tasks = state.task_list.list_tasks(task_filter)
        if not tasks:
            return "Nothing to show."
        return "\n".join(["--- TODO LIST ---", *(format_task(t) for t in tasks)])

    cmd_list.__name__ = f"cmd_list_{task_filter.value}"
    return cmd_list


def cmd_toggle(state: AppState, ask: Prompt) -> str:
    if not len(state.task_list):
        return "No tasks to toggle."
    try:
        task_id = parse_task_id(ask("ID to toggle > "))
        task = state.task_list.toggle(task_id)
    except InvalidNumberError:
        return "Please enter a number."
    except TaskNotFoundError as e:
        return f"No task with ID {e.task_id}."
    state_word = "done" if task.completed else "open"
    return _save_and_report(state, f"Task #{task.id} marked {state_word}.")


def cmd_delete(state: AppState, ask: Prompt) -> str:
    if not len(state.task_list):
        return "No tasks to delete."
    try:
        task_id = parse_task_id(ask("ID to delete > "))
        task = state.task_list.delete(task_id)
    except InvalidNumberError:
        return "Please enter a number."
    except TaskNotFoundError as e:
        return f"No task with ID {e.task_id}."
    return _save_and_report(state, f"Deleted #{task.id}.")


def cmd_clear_completed(state: AppState, ask: Prompt) -> str:
    removed = state.task_list.clear_completed()
    return _save_and_report(state, f"Removed {removed} completed task(s).")


def cmd_exit(state: AppState, ask: Prompt) -> str:
    logger.info("Exit requested; saving %d tasks.", len(state.task_list))
    try:
        state.save()
    except TaskSaveError as e:
        return f"Save failed: {e}\nGoodbye."
    return "Saved. Goodbye."


registry.register("1", cmd_add, "Add task")
registry.register("2", _make_list_handler(TaskFilter.ALL), "List all")
registry.register("3", _make_list_handler(TaskFilter.ACTIVE), "List active")
registry.register("4", _make_list_handler(TaskFilter.COMPLETED), "List completed")
registry.register("5", cmd_toggle, "Toggle done/undone")
registry.register("6", cmd_delete, "Delete task")
registry.register("7", cmd_clear_completed, "Clear completed")
registry.register(EXIT_CHOICE, cmd_exit, "Save and exit")
