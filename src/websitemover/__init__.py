"""
websitemover - moves a generated documentation website into the output folder.

Replaces the build's copy of the website files with a move, either folder by
folder or file by file, and ships a plug-in that times every build step.
"""

__version__ = "1.0.0"
__author__ = "websitemover developers"
__license__ = "MIT"
__copyright__ = "Copyright (c) websitemover developers"

from .config import MoveWebsiteFilesConfiguration, load_configuration, to_xml
from .errors import (
    ConfigurationParseError,
    DestinationCollisionError,
    InvalidRelocationRequestError,
    WebsiteMoverError,
)
from .mover import (
    RelocationRequest,
    RelocationResult,
    RelocationStrategy,
    WebsiteRelocator,
    relocate,
)
from .plugins import MoveWebsiteFilesPlugin, PerfDiagPlugin
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    # Configuration
    "MoveWebsiteFilesConfiguration",
    "load_configuration",
    "to_xml",
    # Relocation
    "WebsiteRelocator",
    "RelocationRequest",
    "RelocationResult",
    "RelocationStrategy",
    "relocate",
    # Plug-ins
    "MoveWebsiteFilesPlugin",
    "PerfDiagPlugin",
    # Errors
    "WebsiteMoverError",
    "ConfigurationParseError",
    "DestinationCollisionError",
    "InvalidRelocationRequestError",
]
