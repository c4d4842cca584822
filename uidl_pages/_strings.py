"""String helpers shared by the generators."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def camel_case_to_dash_case(value: str) -> str:
    """Convert ``HomePage`` style identifiers into ``home-page``.

    Examples
    --------
    >>> camel_case_to_dash_case("HomePage")
    'home-page'
    >>> camel_case_to_dash_case("about")
    'about'
    """
    return _CAMEL_BOUNDARY.sub(r"\1-\2", value).lower()


def slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    return _NON_SLUG.sub("-", camel_case_to_dash_case(value)).strip("-")


__all__ = ["camel_case_to_dash_case", "slugify"]
