# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (initial load included), then runs the
console menu loop until the user exits.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = level_from_name(settings.log_level)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (storage=%s)...", settings.app_name, settings.storage_path)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")
    sys.exit(0)


if __name__ == "__main__":
    main()
