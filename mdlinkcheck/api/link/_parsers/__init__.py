"""Markdown parser backends."""

from ._BaseParser import BaseParser
from ._MarkdownItParser import MarkdownItParser
from ._PandocParser import PandocParser

_PARSERS: dict[str, type[BaseParser]] = {
    "markdown": MarkdownItParser,
    "pandoc": PandocParser,
}

DEFAULT_PARSER = "markdown"


def parser_names() -> list[str]:
    """Names accepted by get_parser."""
    return list(_PARSERS)


def get_parser(parser_name: str | None = None) -> BaseParser:
    """Get a parser instance by name (default: markdown-it)."""
    parser_cls = _PARSERS.get(parser_name or DEFAULT_PARSER)
    if not parser_cls:
        raise ValueError(f"Unknown parser: {parser_name}")
    return parser_cls()


__all__ = [
    "DEFAULT_PARSER",
    "BaseParser",
    "MarkdownItParser",
    "PandocParser",
    "get_parser",
    "parser_names",
]
