"""Configuration module for websitemover."""

from .manager import ConfigManager, get_config_manager
from .models import (
    DEFAULT_PROGRESS_INTERVAL,
    LoggingSettings,
    MoveWebsiteFilesConfiguration,
    RelocationSettings,
    WebsiteMoverConfig,
)
from .xml_fragment import (
    load_configuration,
    read_configuration_file,
    to_xml,
    write_configuration_file,
)

__all__ = [
    "DEFAULT_PROGRESS_INTERVAL",
    "MoveWebsiteFilesConfiguration",
    "WebsiteMoverConfig",
    "LoggingSettings",
    "RelocationSettings",
    "ConfigManager",
    "get_config_manager",
    "load_configuration",
    "to_xml",
    "read_configuration_file",
    "write_configuration_file",
]
