"""Local link resolver."""

import os
from pathlib import Path

from ...utils.logger import get_logger
from ..config.RunConfig import RunConfig
from ._parsers import BaseParser
from .has_anchor import has_anchor
from .LinkRecord import LinkRecord
from .LinkValidationError import LinkValidationError

logger = get_logger("link.resolve_link")

RELATIVE_PATH_DISALLOWED = "relative path used without relative-links mode enabled"
TARGET_NOT_FOUND = "target file not found"
ANCHOR_NOT_FOUND = "anchor not found in target file"

_SEPARATORS = tuple(sep for sep in ("/", os.sep, os.altsep) if sep)


def _split_target(target: str, source_file: Path, dropped_extension: str | None) -> tuple[str, str]:
    """Split a target into its page part and anchor part.

    An anchor-only target (``#section``) names the source document itself. The
    page part is written the way a link to that document would be, so adding
    the dropped extension back yields the source file name again.
    """
    if target.startswith("#"):
        page = source_file.name
        if dropped_extension:
            page = page.removesuffix(f".{dropped_extension}")
        return page, target[1:]

    page, _, anchor = target.partition("#")
    return page, anchor


def resolve_link(
    record: LinkRecord,
    source_file: Path,
    config: RunConfig,
    parser: BaseParser,
) -> LinkValidationError | None:
    """Resolve one local link and validate its target.

    Args:
        record: The link as extracted from ``source_file``
        source_file: Document the link was written in
        config: Active run configuration
        parser: Backend used to read headings of the target document

    Returns:
        None if the link resolves, otherwise the failure to report

    Raises:
        ParseError: If the anchor's target document cannot be parsed
    """
    page, anchor = _split_target(record.target, source_file, config.dropped_extension)

    def failure(description: str) -> LinkValidationError:
        return LinkValidationError(
            source_file=str(source_file),
            position=record.position,
            target=record.target,
            description=description,
        )

    if config.dropped_extension:
        page = f"{page}.{config.dropped_extension}"

    if any(sep in page for sep in _SEPARATORS) and not config.relative_links:
        return failure(RELATIVE_PATH_DISALLOWED)

    # Targets resolve against the linking document's directory, never base_path.
    source_dir = source_file.resolve().parent
    candidate = source_dir / page
    logger.debug(f"Resolved '{record.target}' from {source_file} to {candidate}")

    if not candidate.is_file():
        return failure(f"{TARGET_NOT_FOUND} ({page})")

    if anchor and not has_anchor(candidate, anchor, parser):
        return failure(f"{ANCHOR_NOT_FOUND} (#{anchor})")

    return None
