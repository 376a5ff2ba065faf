"""Progress sinks receiving the relocator's status messages."""

from typing import Protocol

from rich.console import Console

from ..utils.logging import get_console, get_logger

logger = get_logger(__name__)


class ProgressSink(Protocol):
    """Receives human-readable status lines.

    ``message`` is a ``str.format`` template with positional fields, e.g.
    ``"Moved {0} files"``.
    """

    def report(self, message: str, *args) -> None: ...


def format_message(message: str, *args) -> str:
    """Fill a progress template, leaving it untouched when there are no args."""
    return message.format(*args) if args else message


class LoggerProgressSink:
    """Writes progress messages to the websitemover logger."""

    def __init__(self, name: str = "progress"):
        self.logger = get_logger(name)

    def report(self, message: str, *args) -> None:
        self.logger.info(format_message(message, *args))


class ConsoleProgressSink:
    """Prints progress messages to the Rich console."""

    def __init__(self, console: Console | None = None, style: str = "info"):
        self.console = console or get_console()
        self.style = style

    def report(self, message: str, *args) -> None:
        text = format_message(message, *args)
        # Messages carry file paths, which may contain brackets
        self.console.print(text, style=self.style, markup=False, highlight=False)
        logger.debug(text)
