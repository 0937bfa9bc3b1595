"""Fatal error hierarchy for link checking.

Broken links are not exceptions: they are reported as LinkValidationError
records. Everything raised from this module aborts the run.
"""


class LinkCheckError(Exception):
    """Base class for conditions that abort a link check run."""


class ConfigError(LinkCheckError):
    """Raised when run configuration is invalid."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


class ExtractionError(LinkCheckError):
    """Raised when links cannot be extracted from a document tree."""


class NoLinksFoundError(ExtractionError):
    """Raised when a document tree contains no link nodes.

    Callers treat this as "nothing to check" for that document only.
    """


class MalformedDocumentError(ExtractionError):
    """Raised when a parsed document has link nodes without a target or position."""


class ParseError(LinkCheckError):
    """Raised when a document cannot be read or parsed."""

    def __init__(self, path: object, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path}: {reason}")


class MissingDependencyError(LinkCheckError):
    """Raised when a required external program is not installed."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(f"Required program not found on PATH: {program}")
