"""Drop external links from a link list."""

from collections.abc import Iterable

from .is_local import is_local
from .LinkRecord import LinkRecord


def filter_local(records: Iterable[LinkRecord]) -> list[LinkRecord]:
    """Keep only records whose target is local, preserving document order."""
    return [record for record in records if is_local(record.target)]
