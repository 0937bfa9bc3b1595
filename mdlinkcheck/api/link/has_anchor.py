"""Anchor validator."""

from pathlib import Path

from ._parsers import BaseParser
from .DocumentNode import NODE_HEADING


def has_anchor(file_path: Path, anchor_name: str, parser: BaseParser) -> bool:
    """Check whether a document has a heading whose identifier is ``anchor_name``.

    The anchor is compared as written in the link; only the heading side is
    normalized (by the parser's identifier convention).

    Raises:
        ParseError: If the target document cannot be read or parsed
    """
    tree = parser.parse_file(file_path)
    for node in tree.walk():
        if node.type != NODE_HEADING or not node.identifier:
            continue
        if node.identifier == anchor_name:
            return True
    return False
