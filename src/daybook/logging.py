# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from daybook import configuration

_INITIALIZED = False


def configure_logging(level: str = "INFO", *, log_path: Optional[Path] = None) -> None:
    """Configure application-wide logging with a rotating file and a rich console handler."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    log_file = log_path or configuration.DATA_LOG_PATH
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Terminal output belongs to the views, only problems go to stderr
    console_handler = RichHandler(
        console=Console(stderr=True), show_time=False, show_path=False
    )
    console_handler.setLevel(logging.WARNING)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(file_handler)
    root.addHandler(console_handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)


__all__ = ["configure_logging"]
