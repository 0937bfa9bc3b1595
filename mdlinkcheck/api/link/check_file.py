"""Check the links of a single document."""

from pathlib import Path

from ...utils.logger import get_logger
from ..config.RunConfig import RunConfig
from ..errors import NoLinksFoundError
from ._parsers import BaseParser
from .ErrorReport import ErrorReport
from .extract_links import extract_links
from .filter_local import filter_local
from .resolve_link import resolve_link

logger = get_logger("link.check_file")


def check_file(source_file: Path, config: RunConfig, parser: BaseParser, report: ErrorReport) -> int:
    """Validate every local link of ``source_file``.

    Broken links go to ``report``; fatal conditions (unreadable or malformed
    documents, missing parser dependencies) propagate.

    Returns:
        Number of local links checked
    """
    tree = parser.parse_file(source_file)
    try:
        records = extract_links(tree)
    except NoLinksFoundError:
        logger.debug(f"No links in {source_file}")
        return 0

    local_records = filter_local(records)
    logger.debug(f"{source_file}: {len(records)} links, {len(local_records)} local")
    for record in local_records:
        error = resolve_link(record, source_file, config, parser)
        if error is not None:
            report.add(error)
    return len(local_records)
