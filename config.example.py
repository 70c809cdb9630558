# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in log lines (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TODO_LOG_TO_FILE": "Write a full debug log to <data_dir>/todo.log (true/false, default: true).",
    # Paths
    "TODO_STORAGE_PATH": "Task storage file (default: todos.db in the working directory).",
    "TODO_DATA_DIR": "Local data directory for logs (default: .local/todo).",
}
