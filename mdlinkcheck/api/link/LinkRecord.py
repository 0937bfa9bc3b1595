"""Link record model (UNO: single model)."""

from dataclasses import dataclass

from .SourceSpan import SourceSpan


@dataclass(frozen=True)
class LinkRecord:
    """A link target exactly as the parser resolved it, with its position."""

    target: str
    position: SourceSpan
