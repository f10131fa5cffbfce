"""Tests for states.utils module."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from states.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_states_logger() -> Generator[None]:
    """Undo setup_logging changes so other tests see a clean logger."""
    logger = logging.getLogger("states")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_returns_package_logger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STATES_LOG_LEVEL", raising=False)
        logger = setup_logging()
        assert logger is logging.getLogger("states")

    def test_defaults_to_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STATES_LOG_LEVEL", raising=False)
        logger = setup_logging()
        assert logger.level == logging.WARNING

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STATES_LOG_LEVEL", "info")
        assert setup_logging().level == logging.INFO

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STATES_LOG_LEVEL", "info")
        assert setup_logging(logging.ERROR).level == logging.ERROR

    def test_lowercase_level_name(self) -> None:
        assert setup_logging("debug").level == logging.DEBUG

    def test_single_rich_handler(self) -> None:
        setup_logging("info")
        logger = setup_logging("info")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_log_file_created_lazily(self, tmp_path: Path) -> None:
        log_file = tmp_path / "states.log"
        logger = setup_logging("error", log_file=log_file)

        assert not log_file.exists()
        logging.getLogger("states.machine.machine").debug("transition a -> b")
        for handler in logger.handlers:
            handler.flush()

        assert "transition a -> b" in log_file.read_text()

    def test_log_file_keeps_console_level(self, tmp_path: Path) -> None:
        logger = setup_logging("error", log_file=tmp_path / "states.log")
        rich_handler = next(h for h in logger.handlers if isinstance(h, RichHandler))
        assert rich_handler.level == logging.ERROR
        assert logger.level == logging.DEBUG
