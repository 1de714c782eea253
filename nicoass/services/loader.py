"""Comment archive loader.

Reads a niconico live comment XML file::

    <packet>
      <chat thread="..." vpos="1200" user_id="abc" mail="184 red" premium="1">text</chat>
      ...
    </packet>

into CommentRecords in document order.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from nicoass.core.exceptions import CommentSourceError
from nicoass.core.logging import get_logger
from nicoass.models.comment import CommentRecord

logger = get_logger(__name__)

CHAT_TAG = "chat"


def _optional_int(value: str | None, attribute: str, source: str) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError as e:
        raise CommentSourceError(
            f"Attribute '{attribute}' is not an integer: {value!r}",
            source=source,
            context={"attribute": attribute},
        ) from e


def parse_chat(element: ET.Element, source: str = "<string>") -> CommentRecord:
    """Build a CommentRecord from a ``<chat>`` element.

    Args:
        element: Chat element
        source: Name of the archive for error context

    Returns:
        CommentRecord

    Raises:
        CommentSourceError: If a numeric attribute is malformed
    """
    return CommentRecord(
        content=element.text or "",
        user_id=element.get("user_id", ""),
        mail=element.get("mail"),
        vpos=_optional_int(element.get("vpos"), "vpos", source),
        premium=_optional_int(element.get("premium"), "premium", source),
    )


def parse_comments(xml_text: str, source: str = "<string>") -> list[CommentRecord]:
    """Parse comment XML text.

    Args:
        xml_text: XML document
        source: Name of the archive for error context

    Returns:
        Comments in document order

    Raises:
        CommentSourceError: If the document is not well-formed
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise CommentSourceError(f"Invalid comment XML: {e}", source=source) from e

    comments = [parse_chat(element, source) for element in root.iter(CHAT_TAG)]
    logger.debug("Parsed comment archive", source=source, comments=len(comments))
    return comments


def load_comments(path: Path | str) -> list[CommentRecord]:
    """Load comments from an XML file on disk.

    Args:
        path: Path to the comment archive

    Returns:
        Comments in document order

    Raises:
        CommentSourceError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        xml_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CommentSourceError(f"Cannot read comment archive: {e}", source=str(path)) from e

    comments = parse_comments(xml_text, source=str(path))
    logger.info("Loaded comments", path=str(path), comments=len(comments))
    return comments
