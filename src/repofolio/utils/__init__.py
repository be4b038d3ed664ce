"""Utility functions."""

from .console import console
from .logging import get_logger, setup_logging

__all__ = [
    "console",
    "get_logger",
    "setup_logging",
]
