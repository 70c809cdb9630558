# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_tracker.config import DEFAULT_STORAGE_PATH, Settings
from todo_tracker.logging_setup import level_from_name, setup_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_TO_FILE", "STORAGE_PATH", "DATA_DIR"):
        monkeypatch.delenv(f"TODO_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.storage_path == DEFAULT_STORAGE_PATH == Path("todos.db")
    assert s.data_dir == Path(".local/todo")


def test_storage_path_override(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TODO_STORAGE_PATH", str(tmp_path / "mine.db"))
    clean_env.setenv("TODO_LOG_TO_FILE", "off")
    clean_env.setenv("TODO_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.storage_path == tmp_path / "mine.db"
    assert s.log_to_file is False
    assert s.log_level == "debug"


def test_blank_values_fall_back(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TODO_STORAGE_PATH", "   ")
    clean_env.setenv("TODO_APP_NAME", "")
    clean_env.setenv("TODO_LOG_TO_FILE", "")

    s = Settings.from_env()
    assert s.storage_path == DEFAULT_STORAGE_PATH
    assert s.app_name == "todo"
    assert s.log_to_file is True


@pytest.mark.parametrize(
    ("name", "expected"),
    [("info", logging.INFO), ("DEBUG", logging.DEBUG), (" error ", logging.ERROR), ("loud", logging.WARNING)],
)
def test_level_from_name(name: str, expected: int) -> None:
    assert level_from_name(name) == expected


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
        logging.getLogger("todo_tracker.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "todo.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_without_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", log_to_file=False)
        assert not (tmp_path / "logs").exists()
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("todo_tracker.tasks.task_store", logging.DEBUG, True),
        ("todo_tracker", logging.INFO, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("urllib3", logging.WARNING, False),
        ("todo_trackerx", logging.WARNING, False),
    ],
)
def test_console_filter_keeps_own_logs_only(name: str, level: int, shown: bool) -> None:
    from todo_tracker.logging_setup import _ConsoleNoiseFilter

    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    assert _ConsoleNoiseFilter().filter(record) is shown
