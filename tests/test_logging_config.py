import logging
from pathlib import Path

from terminal_maze.logging_config import setup_logging


def test_logs_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "maze.log"
    setup_logging(logging.DEBUG, str(log_file))

    logging.getLogger("terminal_maze.engine").debug("hello from the engine")
    for handler in logging.getLogger("terminal_maze").handlers:
        handler.close()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "terminal_maze.engine - DEBUG - hello from the engine" in text


def test_without_file_nothing_reaches_the_terminal() -> None:
    setup_logging(logging.INFO)

    handlers = logging.getLogger("terminal_maze").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
