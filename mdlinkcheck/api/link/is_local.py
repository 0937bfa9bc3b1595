"""Local link target classifier."""

import re

CONTACT_SCHEME_PATTERN = re.compile(r"^(callto|mailto|tel):")


def is_local(target: str) -> bool:
    """Return True if ``target`` points inside the repository.

    Contact links (``callto:``, ``mailto:``, ``tel:``) and anything containing a
    ``scheme://`` part are external.
    """
    if CONTACT_SCHEME_PATTERN.match(target):
        return False
    return "://" not in target
