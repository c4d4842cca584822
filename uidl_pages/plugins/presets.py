"""Ready-made generator configurations."""

from __future__ import annotations

import typing as typ

from uidl_pages.generator import ComponentGenerator, create_generator

from .head import HtmlHeadPlugin
from .markup import HtmlMarkupPlugin
from .styles import CssStylePlugin

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from uidl_pages.generator import PostProcessor
    from uidl_pages.mapping import MappingTable


def create_html_generator(
    *,
    mappings: cabc.Iterable[MappingTable] = (),
    post_processors: cabc.Iterable[PostProcessor] = (),
    include_style_sets: bool = True,
    link_stylesheet: bool = False,
) -> ComponentGenerator:
    """Return a generator emitting ``html`` and ``css`` files.

    Plugins run markup first, then head tags (anchored before the markup),
    then styles. ``link_stylesheet`` makes each page reference its own CSS
    file, which is how project builds wire page styles.
    """
    return create_generator(
        mappings=mappings,
        plugins=[
            HtmlMarkupPlugin(),
            HtmlHeadPlugin(link_stylesheet=link_stylesheet),
            CssStylePlugin(include_style_sets=include_style_sets),
        ],
        post_processors=post_processors,
    )


__all__ = ["create_html_generator"]
