# src/taskstore/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL
in the main thread until /exit or EOF.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import log_level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = log_level_from_name(settings.log_level)
    log_file = setup_logging(
        app_name=settings.app_name,
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file or "off")

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye. (%d task(s) discarded)", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
