"""Source position capture for markdown-it inline link rules.

markdown-it only maps block tokens to source lines. Link positions are
recovered by recording where the link rule started and stopped inside the
inline content, then mapping those offsets back onto the source lines of the
enclosing block.
"""

from collections.abc import Callable
from dataclasses import dataclass

from markdown_it.rules_inline import StateInline

OFFSETS_META_KEY = "source_offsets"

InlineRule = Callable[[StateInline, bool], bool]


def record_offsets(rule: InlineRule) -> InlineRule:
    """Wrap an inline rule so the link_open token it emits carries its offsets."""

    def wrapped(state: StateInline, silent: bool) -> bool:
        start = state.pos
        first_new = len(state.tokens)
        if not rule(state, silent):
            return False
        if not silent:
            for token in state.tokens[first_new:]:
                if token.type == "link_open":
                    token.meta[OFFSETS_META_KEY] = (start, state.pos)
                    break
        return True

    return wrapped


@dataclass(frozen=True)
class InlineSource:
    """Inline content of a block and where each of its lines sits in the source.

    ``first_line`` is the 0-based source line of the first content line and
    ``columns`` holds the 0-based source column each content line starts at.
    """

    content: str
    first_line: int
    columns: tuple[int, ...]

    @classmethod
    def locate(cls, content: str, first_line: int, source_lines: list[str], cursors: dict[int, int]) -> "InlineSource":
        """Find the content lines of one block on their source lines.

        ``cursors`` maps a source line to the column just past the last block
        located on it, so blocks sharing a line (table cells) are found left to
        right even when their text repeats. Blocks must be located in document
        order.
        """
        columns: list[int] = []
        for line_index, content_line in enumerate(content.split("\n")):
            source_index = first_line + line_index
            if not content_line or source_index >= len(source_lines):
                columns.append(0)
                continue
            # Block markers and indentation precede the content on its source line
            start = source_lines[source_index].find(content_line, cursors.get(source_index, 0))
            if start < 0:
                columns.append(0)
                continue
            columns.append(start)
            cursors[source_index] = start + len(content_line)
        return cls(content=content, first_line=first_line, columns=tuple(columns))

    def position(self, offset: int) -> tuple[int, int]:
        """Map an offset into ``content`` to a 1-based (line, column)."""
        before = self.content[:offset]
        line_index = before.count("\n")
        column = offset - (before.rfind("\n") + 1)
        return self.first_line + line_index + 1, self.columns[line_index] + column + 1
