"""Relocation engine moving a generated website from the staging folder to the output folder."""

import shutil
import time
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from pathlib import Path

from ..config.models import DEFAULT_PROGRESS_INTERVAL, MoveWebsiteFilesConfiguration
from ..errors import DestinationCollisionError, InvalidRelocationRequestError
from ..utils.filesystem import is_hidden, is_within, reset_file_attributes
from ..utils.logging import get_logger
from .progress import LoggerProgressSink, ProgressSink

logger = get_logger(__name__)


class RelocationStrategy(str, Enum):
    """How the website tree is relocated."""

    DIRECT = "direct"
    MANUAL = "manual"

    @classmethod
    def from_configuration(cls, config: MoveWebsiteFilesConfiguration) -> "RelocationStrategy":
        """Pick the strategy selected by the plug-in configuration."""
        return cls.DIRECT if config.use_direct_move else cls.MANUAL


@dataclass(frozen=True)
class RelocationRequest:
    """Source and destination of a relocation."""

    source: Path
    destination: Path

    def __post_init__(self):
        source = Path(self.source)
        destination = Path(self.destination)
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "destination", destination)

        if is_within(source, destination) or is_within(destination, source):
            raise InvalidRelocationRequestError(
                f"Source and destination overlap: '{source}' -> '{destination}'"
            )


@dataclass
class RelocationResult:
    """Result of a relocation."""

    strategy: RelocationStrategy
    source: Path
    destination: Path

    # Only counted when moving file by file
    files_moved: int | None = None
    elapsed: timedelta = field(default_factory=timedelta)

    # Hidden folders left behind in the source
    skipped_directories: list[Path] = field(default_factory=list)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed.total_seconds()


class WebsiteRelocator:
    """
    Moves the contents of a source folder into a destination folder.

    Two strategies are supported:

    * ``DIRECT`` moves every top-level folder and file of the source in one
      operation each. Nothing is merged; an existing entry of the same name at
      the destination is an error.
    * ``MANUAL`` walks the source and moves it file by file, merging into
      whatever already exists at the destination, skipping hidden folders and
      resetting the attributes of every moved file.

    Failures are not rolled back: whatever was moved before an error stays at
    the destination.
    """

    def __init__(
        self,
        sink: ProgressSink | None = None,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    ):
        """
        Initialize the relocator.

        Args:
            sink: Receives progress messages (defaults to the logger)
            progress_interval: Report progress every N files in manual mode
        """
        if progress_interval < 1:
            raise ValueError(f"progress_interval must be positive, got {progress_interval}")

        self.sink = sink if sink is not None else LoggerProgressSink()
        self.progress_interval = progress_interval

    def relocate(
        self,
        request: RelocationRequest,
        strategy: RelocationStrategy = RelocationStrategy.MANUAL,
    ) -> RelocationResult:
        """
        Move everything in ``request.source`` into ``request.destination``.

        A missing source folder is not an error: nothing is moved and the
        usual completion message is still reported.

        Args:
            request: Source and destination folders
            strategy: Relocation strategy

        Returns:
            RelocationResult with the file count (manual mode) and elapsed time

        Raises:
            DestinationCollisionError: If an entry would overwrite an existing one
            NotADirectoryError: If the source exists but is not a folder
            OSError: On any other filesystem failure
        """
        strategy = RelocationStrategy(strategy)
        source = request.source
        destination = request.destination

        self.sink.report("Moving website files from '{0}' to '{1}'...", source, destination)

        result = RelocationResult(strategy=strategy, source=source, destination=destination)
        if strategy is RelocationStrategy.MANUAL:
            result.files_moved = 0

        started = time.perf_counter()

        if not source.exists():
            logger.info(f"Source folder does not exist: {source}")
            self.sink.report("Source folder '{0}' does not exist, nothing to move.", source)
        elif not source.is_dir():
            raise NotADirectoryError(f"Source is not a folder: {source}")
        else:
            try:
                if strategy is RelocationStrategy.DIRECT:
                    self._direct_move(source, destination)
                else:
                    self._manual_move(source, destination, result)
            except OSError as e:
                logger.error(f"Relocation of {source} failed: {e}")
                raise

        result.elapsed = timedelta(seconds=time.perf_counter() - started)

        if strategy is RelocationStrategy.DIRECT:
            self.sink.report("Moved files for the website content in {0}.", result.elapsed)
        else:
            self.sink.report(
                "Moved {0} files for the website content in {1}.",
                result.files_moved,
                result.elapsed,
            )

        return result

    def _direct_move(self, source: Path, destination: Path) -> None:
        """Move each top-level folder, then each top-level file, as a whole."""
        destination.mkdir(parents=True, exist_ok=True)

        entries = sorted(source.iterdir())
        folders = [entry for entry in entries if _is_folder(entry)]
        files = [entry for entry in entries if not _is_folder(entry)]

        for entry in folders + files:
            target = destination / entry.name
            if _entry_exists(target):
                raise DestinationCollisionError(entry, target)

            shutil.move(str(entry), str(target))
            logger.debug(f"Moved: {entry} -> {target}")

    def _manual_move(self, source: Path, destination: Path, result: RelocationResult) -> None:
        """Move the files of ``source`` and recurse into its visible subfolders."""
        entries = sorted(source.iterdir())
        destination_ready = destination.is_dir()

        for entry in entries:
            if _is_folder(entry):
                continue

            # Created on demand so folders without files are not reproduced
            if not destination_ready:
                destination.mkdir(parents=True, exist_ok=True)
                destination_ready = True

            target = destination / entry.name
            if _entry_exists(target):
                raise DestinationCollisionError(entry, target)

            shutil.move(str(entry), str(target))
            if not target.is_symlink():
                reset_file_attributes(target)
            logger.debug(f"Moved: {entry} -> {target}")

            result.files_moved += 1
            if result.files_moved % self.progress_interval == 0:
                self.sink.report("Moved {0} files", result.files_moved)

        for entry in entries:
            if not _is_folder(entry):
                continue

            if is_hidden(entry):
                logger.debug(f"Skipping hidden folder: {entry}")
                result.skipped_directories.append(entry)
                continue

            self._manual_move(entry, destination / entry.name, result)


def _is_folder(path: Path) -> bool:
    # Links to folders are moved as links
    return path.is_dir() and not path.is_symlink()


def _entry_exists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def relocate(
    source: Path,
    destination: Path,
    strategy: RelocationStrategy = RelocationStrategy.MANUAL,
    sink: ProgressSink | None = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> RelocationResult:
    """
    Convenience wrapper around :class:`WebsiteRelocator`.

    Args:
        source: Staging folder holding the generated website
        destination: Final output folder
        strategy: Relocation strategy
        sink: Receives progress messages
        progress_interval: Report progress every N files in manual mode

    Returns:
        RelocationResult
    """
    relocator = WebsiteRelocator(sink=sink, progress_interval=progress_interval)
    return relocator.relocate(RelocationRequest(source, destination), strategy)
