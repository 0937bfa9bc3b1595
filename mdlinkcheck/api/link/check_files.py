"""Run driver: check the links of many documents."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from ...utils.logger import get_logger
from ..config.RunConfig import RunConfig
from ..errors import LinkCheckError
from ._parsers import BaseParser
from .check_file import check_file
from .ErrorReport import ErrorReport

logger = get_logger("link.check_files")


def check_files(
    paths: Sequence[Path],
    config: RunConfig,
    parser: BaseParser,
    report: ErrorReport,
    jobs: int = 1,
) -> int:
    """Check documents one at a time, or across ``jobs`` worker threads.

    Documents are independent: workers only read the filesystem and write to
    ``report``. The first fatal error cancels every document not yet started;
    documents already being checked finish before the error is re-raised.

    Returns:
        Total number of local links checked
    """
    if jobs <= 1 or len(paths) <= 1:
        return sum(check_file(path, config, parser, report) for path in paths)

    logger.debug(f"Checking {len(paths)} documents with {jobs} workers")
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        futures = [pool.submit(check_file, path, config, parser, report) for path in paths]
        checked = 0
        try:
            for future in as_completed(futures):
                checked += future.result()
        except LinkCheckError:
            logger.debug("Fatal error in a worker, cancelling pending documents")
            pool.shutdown(wait=True, cancel_futures=True)
            raise
    return checked
