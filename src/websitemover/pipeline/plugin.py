"""Interface implemented by build plug-ins."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from ..config.models import MoveWebsiteFilesConfiguration
from .build import BuildProcess, ExecutionContext, ExecutionPoint

# Receives a clone of the configuration; returns it edited to confirm or None to cancel
ConfigurationEditor = Callable[[MoveWebsiteFilesConfiguration], MoveWebsiteFilesConfiguration | None]


@dataclass(frozen=True)
class PluginMetadata:
    """Identification of a plug-in, reported when it is initialized."""

    id: str
    version: str
    copyright: str = ""
    description: str = ""
    is_configurable: bool = False


class BuildPlugin(ABC):
    """
    Base class for build plug-ins.

    The dispatcher calls ``initialize`` once per build, ``execute`` for every
    execution point the plug-in declared, and ``dispose`` when the build ends.
    """

    metadata: PluginMetadata

    @property
    @abstractmethod
    def execution_points(self) -> list[ExecutionPoint]:
        """Build steps the plug-in runs at."""

    def configure(self, current_config: str | None, editor: ConfigurationEditor | None = None) -> str | None:
        """
        Let the plug-in edit its configuration fragment.

        Plug-ins without settings return the current fragment unchanged.
        """
        return current_config

    @abstractmethod
    def initialize(self, build: BuildProcess, configuration: str | None) -> None:
        """Prepare the plug-in for a build."""

    @abstractmethod
    def execute(self, context: ExecutionContext) -> None:
        """Run the plug-in at one of its execution points."""

    def dispose(self) -> None:
        """Release anything held for the build."""

    def report_banner(self, build: BuildProcess) -> None:
        """Report the plug-in's name, version and copyright."""
        build.report_progress(
            "{0} Version {1}\n{2}",
            self.metadata.id,
            self.metadata.version,
            self.metadata.copyright,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False
