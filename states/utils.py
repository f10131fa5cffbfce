"""Logging setup for applications driving a state machine."""

import logging
from os import getenv
from pathlib import Path

from rich.logging import RichHandler

from states.console import err_console

DEFAULT_LEVEL = "WARNING"


def setup_logging(
    level: int | str | None = None,
    *,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the ``states`` logger.

    Console output goes through Rich on stderr. With ``log_file``, DEBUG and
    above is also written there; the file is only created when the first
    message is written.

    Args:
        level: Console log level. Defaults to ``STATES_LOG_LEVEL`` or WARNING.
        log_file: Optional path of a debug log file.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger("states")
    logger.handlers.clear()

    if level is None:
        level = getenv("STATES_LOG_LEVEL", DEFAULT_LEVEL)
    if isinstance(level, str):
        level = level.upper()

    console_handler = RichHandler(console=err_console, show_path=False)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    logger.setLevel(level)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, delay=True)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        # File captures DEBUG; logger must allow messages through
        logger.setLevel(logging.DEBUG)

    return logger
