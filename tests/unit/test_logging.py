"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from podcards.config.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level(self) -> None:
        logger = setup_logging()

        assert logger.name == "podcards"
        assert logger.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_verbose_forces_debug(self) -> None:
        assert setup_logging(verbose=True, level="ERROR").level == logging.DEBUG

    def test_level_from_config(self) -> None:
        assert setup_logging(level="warning").level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "podcards.log"
        logger = setup_logging(log_file=log_file)

        logging.getLogger("podcards.episodes.source").warning("fetch failed")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "WARNING" in content
        assert "podcards.episodes.source: fetch failed" in content
