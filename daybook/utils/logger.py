"""
Logging module
Configures the daybook logger: a quiet console and a detailed log file
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import settings


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logger(name: str = "daybook", log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger writing to stdout and to a log file

    The console only shows settings.log_console_level and above, so request
    noise such as skipped records stays in the file.

    Args:
        name: logger name
        log_file: file path, defaults to settings.log_file; empty disables the file

    Returns:
        the configured logger
    """
    log_file = settings.log_file if log_file is None else log_file

    logger = logging.getLogger(name)
    logger.setLevel(_level(settings.log_level))
    # uvicorn configures the root logger; records must not show twice
    logger.propagate = False
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_level(settings.log_console_level))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(_level(settings.log_level))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


logger = setup_logger()
