# src/gtn_manager/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.ports import Prompt
from ..core.state import AppState

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 41


def run_console_loop(
    state: AppState,
    *,
    read_line: Prompt = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive loop: one command per line, each runs to completion.

    read_line/write default to input()/print(); tests pass scripted versions.
    """
    app_name = str(getattr(state.settings, "app_name", "GTN Manager"))
    logger.info("Console started (records=%d).", len(state.store))

    write(SEPARATOR)
    write(f"\tWelcome to {app_name}!\n")
    write("Type /help for commands, /exit to quit.")
    write(SEPARATOR)

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, ask=read_line)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed during a command, exiting.")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."

        write(reply)
        write(SEPARATOR)

    write("Exiting program...")
    logger.info("Console finished.")
