"""Parser-neutral document tree node (UNO: single model)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .SourceSpan import SourceSpan

NODE_DOCUMENT = "document"
NODE_LINK = "link"
NODE_HEADING = "heading"


@dataclass
class DocumentNode:
    """A node of a parsed Markdown document.

    Parser backends build these trees; the link extractor and the anchor
    validator only ever read them. Nodes other than documents, links and
    headings keep the backend's own type tag and exist to preserve order.
    """

    type: str
    children: list[DocumentNode] = field(default_factory=list)
    destination: str | None = None
    span: SourceSpan | None = None
    content: str = ""
    identifier: str = ""

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()
