"""Logging setup for podcards."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "INFO",
) -> logging.Logger:
    """Configure the ``podcards`` logger.

    Console output goes to stderr through rich. When ``log_file`` is given,
    records are also written there in plain text.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file to append logs to
        level: Level name used when not verbose

    Returns:
        The configured package logger
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("podcards")
    logger.setLevel(log_level)
    logger.propagate = False

    # Re-running setup (tests, repeated CLI invocations) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
