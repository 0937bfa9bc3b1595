"""Source span model (UNO: single model)."""

import re
from dataclasses import dataclass

from ..errors import MalformedDocumentError

# "12:3-12:40", optionally prefixed by a source name ("stdin@12:3-12:40")
_POSITION_PATTERN = re.compile(r"(?:.*@)?(\d+):(\d+)-(\d+):(\d+)")


@dataclass(frozen=True)
class SourceSpan:
    """Where a link was written in its document.

    Lines and columns are 1-based. The end column points just past the last
    character of the link.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @classmethod
    def parse(cls, text: str) -> "SourceSpan":
        """Parse a ``line:col-line:col`` position string.

        Raises:
            MalformedDocumentError: If the text is not a position range.
        """
        match = _POSITION_PATTERN.fullmatch(text.strip())
        if match is None:
            raise MalformedDocumentError(f"Invalid source position: {text!r}")
        start_line, start_column, end_line, end_column = (int(group) for group in match.groups())
        return cls(start_line, start_column, end_line, end_column)

    def __str__(self) -> str:
        return f"@{self.start_line}:{self.start_column}-{self.end_line}:{self.end_column}"
