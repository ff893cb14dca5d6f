"""
Logging setup for translate-docs-ocr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from translate_docs_ocr.config import LoggingConfig


def setup_logging(config: LoggingConfig, console: Console | None = None) -> None:
    """
    Configure the package logger.

    Console output goes through rich on stderr. When ``config.file`` is set,
    records are also written to a size-rotated log file.
    """
    root = logging.getLogger("translate_docs_ocr")
    root.setLevel(config.level)
    root.propagate = False

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(rich_handler)

    if config.file:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        root.addHandler(file_handler)
