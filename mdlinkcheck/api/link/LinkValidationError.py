"""Link validation failure model (UNO: single model)."""

from dataclasses import dataclass

from .SourceSpan import SourceSpan


@dataclass(frozen=True)
class LinkValidationError:
    """A link that failed validation.

    This is a record, not an exception: failures are collected by ErrorReport
    and never interrupt the run.
    """

    source_file: str
    position: SourceSpan
    target: str
    description: str

    def __str__(self) -> str:
        return f"{self.source_file}{self.position} ('{self.target}') {self.description}"
