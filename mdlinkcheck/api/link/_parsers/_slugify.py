"""GitHub-style heading identifiers."""

import re

# Everything except letters, digits, underscore, space and hyphen
_PUNCTUATION_PATTERN = re.compile(r"[^\w\- ]")


def slugify(text: str) -> str:
    """Derive the anchor identifier GitHub gives a heading.

    Examples:
        >>> slugify("Some Heading")
        'some-heading'
        >>> slugify("What's new in 2.0?")
        'whats-new-in-20'
    """
    slug = text.strip().lower()
    slug = _PUNCTUATION_PATTERN.sub("", slug)
    return slug.replace(" ", "-")


def unique_slug(slug: str, seen: dict[str, int]) -> str:
    """Disambiguate repeated identifiers within one document.

    The first occurrence keeps its slug, later ones get ``-1``, ``-2``, ...
    """
    if not slug:
        return slug
    if slug not in seen:
        seen[slug] = 0
        return slug
    while True:
        seen[slug] += 1
        candidate = f"{slug}-{seen[slug]}"
        if candidate not in seen:
            seen[candidate] = 0
            return candidate
