"""Plug-in that moves the website files instead of letting the build copy them."""

from .. import __copyright__, __version__
from ..config.models import MoveWebsiteFilesConfiguration
from ..config.xml_fragment import load_configuration, to_xml
from ..mover import RelocationRequest, RelocationResult, RelocationStrategy, WebsiteRelocator
from ..pipeline import (
    BuildPlugin,
    BuildProcess,
    BuildStep,
    ConfigurationEditor,
    ExecutionBehavior,
    ExecutionContext,
    ExecutionPoint,
    PluginMetadata,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


class MoveWebsiteFilesPlugin(BuildPlugin):
    """
    Moves the generated website from the working folder to the output folder.

    Runs before the build's own copy of the website files, so the copy finds
    nothing left to do.
    """

    metadata = PluginMetadata(
        id="MoveWebsiteFiles",
        version=__version__,
        copyright=__copyright__,
        description="Moves the website files to the output folder instead of copying them.",
        is_configurable=True,
    )

    def __init__(self, progress_interval: int | None = None):
        """
        Initialize the plug-in.

        Args:
            progress_interval: Override for how often manual moves report progress
        """
        self.progress_interval = progress_interval
        self.build: BuildProcess | None = None
        self.configuration: MoveWebsiteFilesConfiguration | None = None
        self.last_result: RelocationResult | None = None

    @property
    def execution_points(self) -> list[ExecutionPoint]:
        return [ExecutionPoint(BuildStep.COPYING_WEBSITE_FILES, ExecutionBehavior.BEFORE)]

    def configure(self, current_config: str | None, editor: ConfigurationEditor | None = None) -> str | None:
        """
        Edit the configuration fragment.

        The editor works on a copy; the new fragment is returned only when the
        editor confirms by returning the edited copy.

        Raises:
            ConfigurationParseError: If ``current_config`` is malformed
        """
        configuration = load_configuration(current_config)
        if editor is None:
            return current_config

        edited = editor(configuration.clone())
        if edited is None:
            logger.debug("Configuration edit canceled")
            return current_config

        return to_xml(edited)

    def initialize(self, build: BuildProcess, configuration: str | None) -> None:
        """
        Load the configuration for the build.

        Raises:
            ConfigurationParseError: If the configuration fragment is malformed
        """
        self.build = build
        self.report_banner(build)
        self.configuration = load_configuration(configuration)
        logger.debug(f"Direct move enabled: {self.configuration.use_direct_move}")

    def execute(self, context: ExecutionContext) -> None:
        if context.build_step is not BuildStep.COPYING_WEBSITE_FILES:
            return
        if self.build is None or self.configuration is None:
            raise RuntimeError("Plug-in executed before it was initialized")

        strategy = RelocationStrategy.from_configuration(self.configuration)
        kwargs = {}
        if self.progress_interval is not None:
            kwargs["progress_interval"] = self.progress_interval

        relocator = WebsiteRelocator(sink=self.build, **kwargs)
        self.last_result = relocator.relocate(
            RelocationRequest(self.build.website_working_folder, self.build.output_folder),
            strategy,
        )

    def dispose(self) -> None:
        self.build = None
