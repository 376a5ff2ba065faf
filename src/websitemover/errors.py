"""Exception types raised by websitemover."""


class WebsiteMoverError(Exception):
    """Base error for the project."""


class ConfigurationParseError(WebsiteMoverError, ValueError):
    """The plug-in configuration fragment could not be parsed."""


class InvalidRelocationRequestError(WebsiteMoverError, ValueError):
    """Source and destination of a relocation overlap."""


class DestinationCollisionError(WebsiteMoverError, FileExistsError):
    """An entry with the same name already exists at the destination."""

    def __init__(self, source, destination):
        self.source = source
        self.destination = destination
        super().__init__(f"Destination already exists: {destination} (moving {source})")
