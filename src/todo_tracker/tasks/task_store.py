# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .errors import TaskLoadError, TaskSaveError
from .task_models import Task

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
FIELD_COUNT = 4
NEWLINE_ESCAPE = "\\n"

_ID_RE = re.compile(r"[+-]?[0-9]+")
# Local date-time only: no zone, no space separator, no date-only form.
_TIMESTAMP_RE = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}(?::[0-9]{2})?)"
    r"(?:\.(?P<frac>[0-9]{1,9}))?"
)


def parse_id(raw: str) -> int:
    if not _ID_RE.fullmatch(raw):
        raise ValueError(f"invalid task id: {raw!r}")
    return int(raw)


def parse_timestamp(raw: str) -> datetime:
    m = _TIMESTAMP_RE.fullmatch(raw)
    if m is None:
        raise ValueError(f"invalid local date-time: {raw!r}")
    text = m["base"]
    if m["frac"]:
        # Older writers store up to nanoseconds; datetime keeps microseconds.
        text += "." + m["frac"][:6].ljust(6, "0")
    value = datetime.fromisoformat(text)
    if value.tzinfo is not None:
        raise ValueError(f"unexpected time zone in {raw!r}")
    return value


def encode_line(task: Task) -> str:
    """
    Serialize one task as `id|completed|created_at|text`.

    Only newlines in the text are escaped; a `|` in the text is written as-is.
    A carriage return is written raw; loads split on "\\n" only, so it survives
    unless it is the last character of the text (that reads as a CRLF line end).
    """
    completed = "true" if task.completed else "false"
    text = task.text.replace("\n", NEWLINE_ESCAPE)
    return FIELD_SEP.join((str(task.id), completed, task.created_at.isoformat(), text))


def decode_line(line: str) -> Task | None:
    """
    Parse one stored line.

    Returns None when the line does not have exactly four fields. Raises
    ValueError when a typed field (id, timestamp) is malformed.
    """
    parts = line.split(FIELD_SEP, FIELD_COUNT - 1)
    if len(parts) != FIELD_COUNT:
        return None

    raw_id, raw_completed, raw_created, raw_text = parts
    return Task(
        id=parse_id(raw_id),
        # Lenient: anything other than "true" is simply not completed.
        completed=raw_completed.lower() == "true",
        created_at=parse_timestamp(raw_created),
        text=raw_text.replace(NEWLINE_ESCAPE, "\n"),
    )


def _strip_line_end(raw: str) -> str:
    line = raw[:-1] if raw.endswith("\n") else raw
    # CRLF files written on Windows.
    return line[:-1] if line.endswith("\r") else line


class TaskStore:
    """
    Flat-file task store.

    Format: UTF-8 text, one task per line, no header:
        <id>|<true|false>|<ISO local date-time>|<text with \\n for newlines>

    Every call opens, fully reads or writes, and closes the file. Saves go
    through a temporary file and os.replace, so a load never sees a half-written
    file.
    """

    def __init__(self, path: str | Path = "todos.db") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No storage file at %s; starting empty.", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        try:
            # Split on "\n" only so a "\r" inside the text stays in its record.
            with self._path.open("r", encoding="utf-8", newline="\n") as f:
                for lineno, raw in enumerate(f, start=1):
                    task = decode_line(_strip_line_end(raw))
                    if task is None:
                        skipped += 1
                        logger.debug("Skipping malformed line %d in %s", lineno, self._path)
                        continue
                    tasks.append(task)
        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError too.
            logger.warning("Failed to load tasks from %s: %s", self._path, e)
            raise TaskLoadError(f"cannot read {self._path}: {e}") from e

        logger.info("Loaded %d tasks from %s (skipped %d lines)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = "".join(encode_line(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            raise TaskSaveError(str(e)) from e

        logger.debug("Saved %d bytes to %s", len(payload), self._path)
