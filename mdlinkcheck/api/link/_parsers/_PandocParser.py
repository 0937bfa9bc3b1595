"""Markdown parser backend running the pandoc executable."""

from __future__ import annotations

import json
import shutil
import subprocess
from typing import Any

from ...errors import MalformedDocumentError, MissingDependencyError, ParseError
from ..DocumentNode import NODE_DOCUMENT, NODE_HEADING, NODE_LINK, DocumentNode
from ..SourceSpan import SourceSpan
from ._BaseParser import BaseParser

PANDOC_PROGRAM = "pandoc"
PANDOC_ARGS = ("--from", "gfm+sourcepos", "--to", "json")
POSITION_ATTRIBUTE = "data-pos"

_SPACE_ELEMENTS = ("Space", "SoftBreak", "LineBreak")


def _position_attribute(attr: Any) -> SourceSpan | None:
    """Read ``data-pos`` from a pandoc ``[id, classes, key-values]`` attribute."""
    try:
        _identifier, _classes, pairs = attr
        for key, value in pairs:
            if key == POSITION_ATTRIBUTE:
                return SourceSpan.parse(value)
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(f"Invalid pandoc attribute: {attr!r}") from exc
    return None


def _stringify(value: Any) -> str:
    """Plain text of pandoc inline elements."""
    if isinstance(value, list):
        return "".join(_stringify(item) for item in value)
    if not isinstance(value, dict):
        return ""
    tag = value.get("t")
    content = value.get("c")
    if tag == "Str":
        return content
    if tag in _SPACE_ELEMENTS:
        return " "
    if tag == "Code":
        return content[1]
    if tag == "Image":
        return ""
    return _stringify(content)


def _convert(value: Any, inherited_span: SourceSpan | None = None) -> list[DocumentNode]:
    """Convert pandoc JSON elements to document nodes, in document order."""
    if isinstance(value, list):
        return [node for item in value for node in _convert(item)]
    if not isinstance(value, dict) or "t" not in value:
        return []

    tag = value["t"]
    content = value.get("c")
    try:
        if tag == "Link":
            attr, inlines, (url, _title) = content
            span = _position_attribute(attr) or inherited_span
            return [DocumentNode(NODE_LINK, _convert(inlines), destination=url, span=span)]

        if tag == "Header":
            _level, attr, inlines = content
            return [
                DocumentNode(
                    NODE_HEADING,
                    _convert(inlines),
                    content=_stringify(inlines),
                    identifier=attr[0],
                )
            ]

        if tag == "Span":
            attr, inlines = content
            # Source positions may sit on a Span wrapping a single link
            span = _position_attribute(attr)
            if span is not None and len(inlines) == 1:
                return [DocumentNode("Span", _convert(inlines[0], span))]
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(f"Invalid pandoc {tag} element") from exc

    return [DocumentNode(tag, _convert(content))]


def convert_pandoc_json(document: dict[str, Any]) -> DocumentNode:
    """Convert a pandoc JSON document to a document tree."""
    if not isinstance(document, dict) or "blocks" not in document:
        raise MalformedDocumentError("pandoc output has no blocks")
    return DocumentNode(NODE_DOCUMENT, _convert(document["blocks"]))


class PandocParser(BaseParser):
    """Parser delegating to ``pandoc --from gfm+sourcepos --to json``."""

    name = "pandoc"

    def parse(self, text: str) -> DocumentNode:
        executable = shutil.which(PANDOC_PROGRAM)
        if executable is None:
            raise MissingDependencyError(PANDOC_PROGRAM)

        try:
            completed = subprocess.run(
                [executable, *PANDOC_ARGS],
                input=text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise ParseError("<input>", str(exc)) from exc

        if completed.returncode != 0:
            reason = completed.stderr.strip() or f"pandoc exited with status {completed.returncode}"
            raise ParseError("<input>", reason)

        try:
            document = json.loads(completed.stdout)
        except json.JSONDecodeError as exc:
            raise ParseError("<input>", f"invalid pandoc JSON: {exc}") from exc

        return convert_pandoc_json(document)
