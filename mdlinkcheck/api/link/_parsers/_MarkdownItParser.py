"""Markdown parser backend built on markdown-it-py."""

import re

from markdown_it import MarkdownIt
from markdown_it.rules_inline import autolink, link
from markdown_it.tree import SyntaxTreeNode

from ..DocumentNode import NODE_DOCUMENT, NODE_HEADING, NODE_LINK, DocumentNode
from ..SourceSpan import SourceSpan
from ._BaseParser import BaseParser
from ._slugify import slugify, unique_slug
from ._source_offsets import OFFSETS_META_KEY, InlineSource, record_offsets

# Same line splitting markdown-it applies before parsing
_NEWLINE_PATTERN = re.compile(r"\r\n?|\n")

_TEXT_NODES = ("text", "code_inline")
_BREAK_NODES = ("softbreak", "hardbreak")


class _RawLinkMarkdownIt(MarkdownIt):
    """MarkdownIt that keeps link destinations exactly as written.

    The stock instance percent-encodes destinations and blanks out schemes it
    considers unsafe; a link checker needs the author's target verbatim.
    """

    def normalizeLink(self, url: str) -> str:  # noqa: N802
        return url

    def validateLink(self, url: str) -> bool:  # noqa: N802, ARG002
        return True


def _create_markdown_it() -> MarkdownIt:
    md = _RawLinkMarkdownIt("commonmark")
    md.enable(["table", "strikethrough"])
    md.inline.ruler.at("link", record_offsets(link))
    md.inline.ruler.at("autolink", record_offsets(autolink))
    return md


def _rendered_text(node: SyntaxTreeNode) -> str:
    """Plain text of an inline subtree, as GitHub uses it for heading anchors."""
    parts: list[str] = []
    for child in node.children:
        if child.type in _TEXT_NODES:
            parts.append(child.content)
        elif child.type in _BREAK_NODES:
            parts.append(" ")
        elif child.type != "image":
            parts.append(_rendered_text(child))
    return "".join(parts)


class MarkdownItParser(BaseParser):
    """Parser for GitHub-flavored Markdown (CommonMark, tables, strikethrough)."""

    name = "markdown"

    def __init__(self):
        self._md = _create_markdown_it()

    def parse(self, text: str) -> DocumentNode:
        source_lines = _NEWLINE_PATTERN.split(text)
        root = SyntaxTreeNode(self._md.parse(text))
        document = DocumentNode(NODE_DOCUMENT)
        seen: dict[str, int] = {}
        cursors: dict[int, int] = {}
        for child in root.children:
            document.children.append(self._convert(child, source_lines, cursors, None, None, seen))
        return document

    def _convert(
        self,
        node: SyntaxTreeNode,
        source_lines: list[str],
        cursors: dict[int, int],
        block_map: list[int] | None,
        inline: InlineSource | None,
        seen: dict[str, int],
    ) -> DocumentNode:
        block_map = node.map or block_map
        if node.type == "inline" and block_map is not None:
            inline = InlineSource.locate(node.content, block_map[0], source_lines, cursors)

        if node.type == "image":
            return DocumentNode("image")

        if node.type == NODE_LINK:
            converted = DocumentNode(
                NODE_LINK,
                destination=node.attrs.get("href"),
                span=self._span(node, inline),
            )
        elif node.type == NODE_HEADING:
            content = _rendered_text(node)
            converted = DocumentNode(
                NODE_HEADING,
                content=content,
                identifier=unique_slug(slugify(content), seen),
            )
        else:
            converted = DocumentNode(node.type)

        for child in node.children:
            converted.children.append(self._convert(child, source_lines, cursors, block_map, inline, seen))
        return converted

    @staticmethod
    def _span(node: SyntaxTreeNode, inline: InlineSource | None) -> SourceSpan | None:
        offsets = node.meta.get(OFFSETS_META_KEY)
        if offsets is None or inline is None:
            return None
        start, end = offsets
        start_line, start_column = inline.position(start)
        end_line, end_column = inline.position(end)
        return SourceSpan(start_line, start_column, end_line, end_column)
