"""Utility modules for websitemover."""

from .filesystem import has_normal_attributes, is_hidden, reset_file_attributes
from .logging import get_console, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "get_console",
    "is_hidden",
    "reset_file_attributes",
    "has_normal_attributes",
]
