"""Link checking domain.

Extraction, classification, resolution and anchor validation of the links of
Markdown documents, plus the run driver tying them together.
"""

from .check_file import check_file
from .check_files import check_files
from .DocumentNode import DocumentNode
from .ErrorReport import ErrorReport
from .extract_links import extract_links
from .filter_local import filter_local
from .has_anchor import has_anchor
from .is_local import is_local
from .LinkRecord import LinkRecord
from .LinkValidationError import LinkValidationError
from .resolve_link import resolve_link
from .SourceSpan import SourceSpan

__all__ = [
    "DocumentNode",
    "ErrorReport",
    "LinkRecord",
    "LinkValidationError",
    "SourceSpan",
    "check_file",
    "check_files",
    "extract_links",
    "filter_local",
    "has_anchor",
    "is_local",
    "resolve_link",
]
