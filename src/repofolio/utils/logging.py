"""Logging setup for repofolio.

Log records go to stderr through rich so they never interleave with the
summaries and tables the CLI prints to stdout.
"""

import logging
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

NAMESPACE = "repofolio"
FILE_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """Attach console and optional file handlers to the repofolio logger.

    Without verbose the console only shows warnings, which during a build
    means degraded repositories and truncated listings.

    Args:
        level: Level of the repofolio logger itself
        log_file: Optional file receiving every record that passes `level`
        verbose: Show progress (INFO) records on the console

    Returns:
        The configured repofolio logger
    """
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, placed under the repofolio namespace."""
    if name == NAMESPACE or name.startswith(f"{NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{NAMESPACE}.{name}")
