# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_CHOICE, MenuRegistry, Prompt
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Choice > "


def run_console_loop(
    state: AppState,
    *,
    read_line: Prompt = input,
    write: Callable[[str], None] = print,
    menu: MenuRegistry | None = None,
) -> None:
    """
    Menu loop over stdin/stdout.

    One line is read and fully handled (save included) before the next prompt.
    The loop ends on the exit choice, or on EOF / Ctrl+C, which save the same way.
    """
    menu = menu or menu_registry
    logger.info("Console connector started (tasks=%d).", len(state.task_list))

    if state.load_warning:
        write(state.load_warning)

    while True:
        write("")
        write(menu.build_menu(state))

        choice = ""
        try:
            choice = read_line(CHOICE_PROMPT).strip()
            response = menu.handle(state, choice, read_line)
        except EOFError:
            logger.info("Console EOF received, saving and exiting.")
            write("")
            write(menu.handle(state, EXIT_CHOICE, read_line))
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, saving and exiting.")
            write("")
            write(menu.handle(state, EXIT_CHOICE, read_line))
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        write(response)

        if choice == EXIT_CHOICE:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
