"""Slug derivation for catalog items."""

import re

_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def to_slug(text: str) -> str:
    """Turn a display name into a URL-safe slug.

    Anything that is not an ASCII letter, digit, whitespace or hyphen is dropped,
    whitespace runs become a single hyphen and the result is lowercased.
    ``to_slug(to_slug(x)) == to_slug(x)`` for every input.
    """
    cleaned = _DISALLOWED.sub("", text).strip()
    return _WHITESPACE.sub("-", cleaned).lower()
