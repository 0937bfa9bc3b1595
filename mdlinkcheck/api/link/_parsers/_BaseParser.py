"""Abstract base parser for document trees."""

from abc import ABC, abstractmethod
from pathlib import Path

from ...errors import ParseError
from ..DocumentNode import DocumentNode


class BaseParser(ABC):
    """Abstract interface for Markdown parser backends."""

    name: str = ""

    @abstractmethod
    def parse(self, text: str) -> DocumentNode:
        """Parse Markdown text into a document tree."""
        pass

    def parse_file(self, path: Path) -> DocumentNode:
        """Read a UTF-8 document and parse it.

        Raises:
            ParseError: If the file cannot be read, decoded or parsed
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(path, str(exc)) from exc

        try:
            return self.parse(text)
        except ParseError as exc:
            raise ParseError(path, exc.reason) from exc
