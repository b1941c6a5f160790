"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and the Rich path handler.
Why: Provide a single canonical import path for library and host code.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import FilepathRichHandler

__all__ = [
    "FilepathRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
