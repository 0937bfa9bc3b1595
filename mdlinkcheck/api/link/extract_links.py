"""Link extractor."""

from ..errors import MalformedDocumentError, NoLinksFoundError
from .DocumentNode import NODE_LINK, DocumentNode
from .LinkRecord import LinkRecord


def extract_links(tree: DocumentNode) -> list[LinkRecord]:
    """Collect every link of a parsed document in document order.

    Args:
        tree: Root node produced by a parser backend

    Returns:
        One LinkRecord per link node, using the destination the parser resolved
        (reference-style links carry their definition's destination)

    Raises:
        NoLinksFoundError: If the document has no links at all
        MalformedDocumentError: If a link node has no destination or position
    """
    records: list[LinkRecord] = []
    for node in tree.walk():
        if node.type != NODE_LINK:
            continue
        if node.destination is None or node.span is None:
            raise MalformedDocumentError(
                f"Link node without {'destination' if node.destination is None else 'position'}"
            )
        records.append(LinkRecord(target=node.destination, position=node.span))

    if not records:
        raise NoLinksFoundError("Document contains no links")
    return records
