"""Plug-in reporting how long every build step takes."""

import sys
import time
from datetime import timedelta

from .. import __copyright__, __version__
from ..pipeline import (
    BuildPlugin,
    BuildProcess,
    BuildStep,
    ExecutionBehavior,
    ExecutionContext,
    ExecutionPoint,
    PluginMetadata,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Gaps between steps shorter than this are not reported
GAP_THRESHOLD = timedelta(milliseconds=100)

# Steps a plug-in cannot hook into
_EXCLUDED_STEPS = {
    BuildStep.NONE,
    BuildStep.INITIALIZING,
    BuildStep.CANCELED,
    BuildStep.FAILED,
}


class Stopwatch:
    """Restartable elapsed-time counter."""

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._started = clock()

    def restart(self) -> None:
        self._started = self._clock()

    @property
    def elapsed(self) -> timedelta:
        return timedelta(seconds=self._clock() - self._started)


class PerfDiagPlugin(BuildPlugin):
    """Hooks before and after every build step and reports the time spent in each."""

    metadata = PluginMetadata(
        id="PerfDiag",
        version=__version__,
        copyright=__copyright__,
        description="Reports the runtime of every build step and the gaps between them.",
    )

    def __init__(self, clock=time.perf_counter):
        self.build: BuildProcess | None = None
        self.stopwatch = Stopwatch(clock)
        self.last_step = BuildStep.NONE

    @property
    def execution_points(self) -> list[ExecutionPoint]:
        # Runs ahead of every other plug-in at each step
        return [
            ExecutionPoint(step, ExecutionBehavior.BEFORE_AND_AFTER, priority=sys.maxsize)
            for step in BuildStep
            if step not in _EXCLUDED_STEPS
        ]

    def initialize(self, build: BuildProcess, configuration: str | None) -> None:
        self.build = build
        self.last_step = BuildStep.NONE
        self.stopwatch.restart()
        self.report_banner(build)

    def execute(self, context: ExecutionContext) -> None:
        if context.behavior is ExecutionBehavior.BEFORE:
            elapsed = self.stopwatch.elapsed
            if self.last_step is not BuildStep.NONE and elapsed > GAP_THRESHOLD:
                self._message(
                    "Elapsed time between BuildStep '{0}' and '{1}' was {2}.",
                    self.last_step,
                    context.build_step,
                    elapsed,
                )
            self.stopwatch.restart()

        elif context.behavior is ExecutionBehavior.AFTER:
            self._message(
                "BuildStep '{0}' completed in {1}.",
                context.build_step,
                self.stopwatch.elapsed,
            )
            self.stopwatch.restart()
            self.last_step = context.build_step

    def _message(self, message: str, *args) -> None:
        logger.info("PERF: " + message.format(*args))
        if self.build is not None:
            self.build.report_progress(message, *args)

    def dispose(self) -> None:
        self.build = None
