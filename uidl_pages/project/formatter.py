"""Default pretty-printer applied to merged page documents."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from uidl_pages import _constants

Formatter = typ.Callable[[dict[str, str]], dict[str, str]]


def prettify_html(files: dict[str, str]) -> dict[str, str]:
    """Return ``files`` with the ``html`` entry re-indented by BeautifulSoup."""
    formatted = dict(files)
    if _constants.HTML in files:
        soup = BeautifulSoup(files[_constants.HTML], "html.parser")
        formatted[_constants.HTML] = soup.prettify()
    return formatted


__all__ = ["Formatter", "prettify_html"]
