"""Reading and writing the MoveWebsiteFiles configuration XML fragment.

The build host stores plug-in settings as a small XML fragment in the project::

    <configuration><useDirectMove>false</useDirectMove></configuration>
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from ..errors import ConfigurationParseError
from ..utils.logging import get_logger
from .models import MoveWebsiteFilesConfiguration

logger = get_logger(__name__)

ROOT_ELEMENT = "configuration"
USE_DIRECT_MOVE_ELEMENT = "useDirectMove"

# xs:boolean lexical space
_TRUE_LITERALS = {"true", "1"}
_FALSE_LITERALS = {"false", "0"}


def parse_boolean(text: str | None) -> bool:
    """
    Parse an XML boolean literal.

    Args:
        text: Element text (``true``, ``false``, ``1`` or ``0``, any case)

    Returns:
        Parsed value

    Raises:
        ConfigurationParseError: If the text is not a boolean literal
    """
    value = (text or "").strip().lower()
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ConfigurationParseError(f"Invalid boolean value: {text!r}")


def format_boolean(value: bool) -> str:
    """Render a boolean in canonical XML form."""
    return "true" if value else "false"


def _find_configuration(root: ET.Element) -> ET.Element | None:
    if root.tag == ROOT_ELEMENT:
        return root
    return root.find(ROOT_ELEMENT)


def load_configuration(fragment: str | bytes | None) -> MoveWebsiteFilesConfiguration:
    """
    Build a configuration from an XML fragment.

    An empty fragment, or one without a ``useDirectMove`` node, yields the
    defaults.

    Args:
        fragment: XML text as stored by the host, or None. Bytes are decoded
            by the XML parser, honouring any encoding declaration.

    Returns:
        Parsed configuration

    Raises:
        ConfigurationParseError: If the XML or a boolean value is malformed
    """
    if fragment is None or not fragment.strip():
        return MoveWebsiteFilesConfiguration()

    try:
        root = ET.fromstring(fragment)
    except ET.ParseError as e:
        raise ConfigurationParseError(f"Invalid configuration XML: {e}") from e

    configuration = _find_configuration(root)
    if configuration is None:
        logger.debug("No <configuration> element found, using defaults")
        return MoveWebsiteFilesConfiguration()

    node = configuration.find(USE_DIRECT_MOVE_ELEMENT)
    if node is None:
        return MoveWebsiteFilesConfiguration()

    return MoveWebsiteFilesConfiguration(use_direct_move=parse_boolean(node.text))


def to_xml(config: MoveWebsiteFilesConfiguration) -> str:
    """
    Serialize a configuration to its XML fragment.

    Args:
        config: Configuration to serialize

    Returns:
        ``<configuration><useDirectMove>...</useDirectMove></configuration>``
    """
    root = ET.Element(ROOT_ELEMENT)
    node = ET.SubElement(root, USE_DIRECT_MOVE_ELEMENT)
    node.text = format_boolean(config.use_direct_move)
    return ET.tostring(root, encoding="unicode")


def read_configuration_file(path: Path) -> MoveWebsiteFilesConfiguration:
    """
    Load a configuration fragment saved to disk.

    A missing file yields the defaults.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Configuration fragment not found, using defaults: {path}")
        return MoveWebsiteFilesConfiguration()

    return load_configuration(path.read_bytes())


def write_configuration_file(path: Path, config: MoveWebsiteFilesConfiguration) -> None:
    """Save a configuration fragment to disk, creating parent folders."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_xml(config), encoding="utf-8")
    logger.debug(f"Saved configuration fragment: {path}")
