"""Mover module relocating generated website files."""

from .progress import ConsoleProgressSink, LoggerProgressSink, ProgressSink
from .relocator import (
    RelocationRequest,
    RelocationResult,
    RelocationStrategy,
    WebsiteRelocator,
    relocate,
)

__all__ = [
    "WebsiteRelocator",
    "RelocationRequest",
    "RelocationResult",
    "RelocationStrategy",
    "relocate",
    "ProgressSink",
    "LoggerProgressSink",
    "ConsoleProgressSink",
]
