"""Error aggregator for a link check run."""

import sys
import threading
from typing import TextIO

from .LinkValidationError import LinkValidationError
from .SourceSpan import SourceSpan


class ErrorReport:
    """Collects link validation failures for one run and prints them.

    Each failure is written as a single line on the diagnostic stream as soon
    as it is reported. Writes are serialized, so workers checking different
    documents never interleave inside a line. Once an error has been reported
    the report stays failed for the rest of the run.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stderr
        self._lock = threading.Lock()
        self._errors: list[LinkValidationError] = []

    def report(self, source_file: str, position: SourceSpan, target: str, description: str) -> LinkValidationError:
        """Build, print and record a failure."""
        error = LinkValidationError(
            source_file=source_file,
            position=position,
            target=target,
            description=description,
        )
        self.add(error)
        return error

    def add(self, error: LinkValidationError) -> None:
        """Print and record an already built failure."""
        line = f"{error}\n"
        with self._lock:
            self._errors.append(error)
            self._stream.write(line)
            self._stream.flush()

    @property
    def errors(self) -> tuple[LinkValidationError, ...]:
        """Failures in the order they were reported."""
        with self._lock:
            return tuple(self._errors)

    def any_error_found(self) -> bool:
        with self._lock:
            return bool(self._errors)
