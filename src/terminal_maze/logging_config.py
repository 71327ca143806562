"""Logging configuration for the package."""

import logging
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Configure the logger for the `terminal_maze` namespace.

    The terminal belongs to curses while the engine runs, so records only go
    to a file. Without one they are discarded.

    Parameters
    ----------
    level : int, default: logging.INFO
        Logging level, e.g. ``logging.DEBUG``.
    log_file : str | None, default: None
        Path of the file records are written to.
    """
    logger = logging.getLogger("terminal_maze")
    logger.setLevel(level)

    # Avoid duplicate records when configured twice
    if logger.hasHandlers():
        logger.handlers.clear()

    if not log_file:
        logger.addHandler(logging.NullHandler())
        return

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.info("Logging initialized.")
