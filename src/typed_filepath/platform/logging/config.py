"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the package logger and an opt-in setup for console and file output.
Why: A library must not install handlers on import; hosts call ``setup_logger`` explicitly.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import FilepathRichHandler


LOGGER_NAME: Final[str] = "typed_filepath"
FILE_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s [%(filepath)s]"
FILE_LOG_MAX_BYTES: Final[int] = 5 * 1024 * 1024
FILE_LOG_BACKUPS: Final[int] = 3

logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


class _FilepathDefaults(logging.Filter):
    """Fill in ``filepath`` for records logged without path extras."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "filepath"):
            record.filepath = "-"
        return True


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=FILE_LOG_MAX_BYTES,
        backupCount=FILE_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.addFilter(_FilepathDefaults())
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Attach Rich console output (and optionally a rotating file) to the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Where to write file logs. ``None`` disables file output.
        console_level: Threshold for the console handler.
        file_level: Threshold for the file handler.
        console: Rich console to render to; a stderr console when omitted.

    Returns:
        logging.Logger: The ``typed_filepath`` logger.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(min(console_level, file_level) if log_file is not None else console_level)

    console_handler = FilepathRichHandler(
        console=console if console is not None else Console(stderr=True, soft_wrap=True)
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))

    return logger


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
