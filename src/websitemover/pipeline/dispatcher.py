"""Dispatches build steps to registered plug-ins."""

from collections.abc import Callable

from ..utils.logging import get_logger
from .build import BuildProcess, BuildStep, ExecutionBehavior, ExecutionContext
from .plugin import BuildPlugin

logger = get_logger(__name__)


class StageDispatcher:
    """
    Runs registered plug-ins around the build steps of a build.

    Plug-ins are registered explicitly; for every step the dispatcher runs the
    ``BEFORE`` plug-ins, then the ``INSTEAD`` plug-ins or the step's default
    action, then the ``AFTER`` plug-ins. Higher priority runs first.
    """

    def __init__(self, plugins: list[BuildPlugin] | None = None):
        self._plugins: dict[str, BuildPlugin] = {}
        self.build: BuildProcess | None = None
        for plugin in plugins or []:
            self.register(plugin)

    @property
    def plugins(self) -> list[BuildPlugin]:
        """Registered plug-ins in registration order."""
        return list(self._plugins.values())

    def register(self, plugin: BuildPlugin) -> BuildPlugin:
        """
        Register a plug-in.

        Raises:
            ValueError: If a plug-in with the same id is already registered
        """
        plugin_id = plugin.metadata.id
        if plugin_id in self._plugins:
            raise ValueError(f"Plug-in already registered: {plugin_id}")

        self._plugins[plugin_id] = plugin
        logger.debug(f"Registered plug-in {plugin_id}")
        return plugin

    def initialize(self, build: BuildProcess, configurations: dict[str, str] | None = None) -> None:
        """
        Initialize every plug-in for a build.

        Args:
            build: The build being run
            configurations: Configuration fragments keyed by plug-in id
        """
        configurations = configurations or {}
        self.build = build
        for plugin_id, plugin in self._plugins.items():
            plugin.initialize(build, configurations.get(plugin_id))

    def run_step(self, step: BuildStep, default_action: Callable[[], None] | None = None) -> None:
        """
        Run a build step with its plug-ins.

        Args:
            step: Step being run
            default_action: The host's own work for the step
        """
        if self.build is None:
            raise RuntimeError("Dispatcher is not initialized")

        self.build.current_step = step

        self._run_plugins(step, ExecutionBehavior.BEFORE)

        replaced = False
        for plugin, _ in self._plugins_for(step, ExecutionBehavior.INSTEAD):
            context = ExecutionContext(step, ExecutionBehavior.INSTEAD)
            plugin.execute(context)
            replaced = replaced or context.executed

        if not replaced and default_action is not None:
            default_action()

        self._run_plugins(step, ExecutionBehavior.AFTER)

    def dispose(self) -> None:
        """Dispose every plug-in."""
        for plugin in self._plugins.values():
            plugin.dispose()
        self.build = None

    def _plugins_for(self, step: BuildStep, behavior: ExecutionBehavior):
        matches = [
            (plugin, point)
            for plugin in self._plugins.values()
            for point in plugin.execution_points
            if point.applies_to(step, behavior)
        ]
        # Stable, so equal priorities keep registration order
        return sorted(matches, key=lambda match: -match[1].priority)

    def _run_plugins(self, step: BuildStep, behavior: ExecutionBehavior) -> None:
        for plugin, _ in self._plugins_for(step, behavior):
            plugin.execute(ExecutionContext(step, behavior))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False
