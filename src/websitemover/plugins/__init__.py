"""Build plug-ins shipped with websitemover."""

from .move_website_files import MoveWebsiteFilesPlugin
from .perf_diag import PerfDiagPlugin

__all__ = [
    "MoveWebsiteFilesPlugin",
    "PerfDiagPlugin",
]
