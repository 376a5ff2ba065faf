"""Build process model exposed to plug-ins."""

from dataclasses import dataclass, field
from enum import Enum, Flag
from pathlib import Path

from ..mover.progress import ProgressSink, format_message
from ..utils.logging import get_logger

logger = get_logger(__name__)

WEBSITE_OUTPUT_FORMAT = "Website"


class BuildStep(Enum):
    """Steps of the documentation build, in execution order."""

    NONE = 0
    INITIALIZING = 1
    VALIDATING_DOCUMENTATION_SOURCES = 2
    GENERATING_SHARED_CONTENT = 3
    BUILDING_TOPICS = 4
    BUILDING_HELP_FILES = 5
    COPYING_WEBSITE_FILES = 6
    CLEANING_INTERMEDIATES = 7
    COMPLETED = 8
    CANCELED = 9
    FAILED = 10

    def __str__(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


class ExecutionBehavior(Flag):
    """When a plug-in runs relative to a build step."""

    BEFORE = 1
    AFTER = 2
    INSTEAD = 4
    BEFORE_AND_AFTER = BEFORE | AFTER


@dataclass(frozen=True)
class ExecutionPoint:
    """A build step a plug-in hooks into. Higher priority runs first."""

    build_step: BuildStep
    behavior: ExecutionBehavior
    priority: int = 1000

    def applies_to(self, build_step: BuildStep, behavior: ExecutionBehavior) -> bool:
        return self.build_step is build_step and bool(self.behavior & behavior)


@dataclass
class ExecutionContext:
    """Passed to a plug-in each time it is executed."""

    build_step: BuildStep
    behavior: ExecutionBehavior

    # An INSTEAD plug-in clears this to let the default action run
    executed: bool = True


@dataclass
class BuildProcess:
    """The parts of a running build that plug-ins may use."""

    working_folder: Path
    output_folder: Path
    sink: ProgressSink | None = None

    current_step: BuildStep = BuildStep.NONE
    transcript: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.working_folder = Path(self.working_folder)
        self.output_folder = Path(self.output_folder)

    @property
    def website_working_folder(self) -> Path:
        """Staging folder the website output is generated into."""
        return self.working_folder / "Output" / WEBSITE_OUTPUT_FORMAT

    def report_progress(self, message: str, *args) -> None:
        """Record a status line and forward it to the progress sink."""
        text = format_message(message, *args)
        self.transcript.append(text)
        logger.info(text)
        if self.sink is not None:
            self.sink.report(message, *args)

    # Lets the build itself be handed to the relocator as its progress sink
    report = report_progress
