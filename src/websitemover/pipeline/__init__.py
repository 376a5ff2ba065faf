"""Build pipeline contract shared by the host and its plug-ins."""

from .build import (
    BuildProcess,
    BuildStep,
    ExecutionBehavior,
    ExecutionContext,
    ExecutionPoint,
)
from .dispatcher import StageDispatcher
from .plugin import BuildPlugin, ConfigurationEditor, PluginMetadata

__all__ = [
    "BuildProcess",
    "BuildStep",
    "ExecutionBehavior",
    "ExecutionContext",
    "ExecutionPoint",
    "BuildPlugin",
    "ConfigurationEditor",
    "PluginMetadata",
    "StageDispatcher",
]
