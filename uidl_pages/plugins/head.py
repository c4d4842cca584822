"""Turn a component's ``seo`` block into page head tags."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from uidl_pages import _constants
from uidl_pages._strings import camel_case_to_dash_case
from uidl_pages.generator.chunks import ChunkDefinition, LinkDirective

from ._naming import node_class_names
from .markup import HTML_TEMPLATE_CHUNK

if typ.TYPE_CHECKING:
    from bs4.element import Tag

    from uidl_pages.generator.assembly_line import ComponentStructure

HTML_HEAD_CHUNK = "html-head"


class HtmlHeadPlugin:
    """Link ``<title>``/``<meta>`` tags in front of the markup chunk.

    Must run after :class:`~uidl_pages.plugins.HtmlMarkupPlugin`; the project
    merge stage later lifts these tags into the shared document head. With
    ``link_stylesheet`` the chunk also references the component's own CSS file
    whenever the component has styles to emit.
    """

    name = "html-head"

    def __init__(
        self, *, anchor: str = HTML_TEMPLATE_CHUNK, link_stylesheet: bool = False
    ) -> None:
        self.anchor = anchor
        self.link_stylesheet = link_stylesheet

    def __call__(self, structure: ComponentStructure) -> ComponentStructure:
        """Append the head chunk when there is anything to put in it."""
        uidl = structure.uidl
        soup = BeautifulSoup("", "html.parser")
        elements: list[Tag] = []
        seo = uidl.seo
        if seo is not None:
            if seo.title:
                title = soup.new_tag("title")
                title.string = seo.title
                elements.append(title)
            elements.extend(
                soup.new_tag("meta", attrs=dict(attrs)) for attrs in seo.meta_tags
            )
        if self.link_stylesheet and (
            uidl.style_set_definitions or node_class_names(uidl)
        ):
            href = "./" + _constants.FILE_NAME_TEMPLATE.format(
                name=camel_case_to_dash_case(uidl.file_name), file_type=_constants.CSS
            )
            elements.append(
                soup.new_tag("link", attrs={"rel": "stylesheet", "href": href})
            )
        if not elements:
            return structure

        structure.chunks.append(
            ChunkDefinition(
                name=HTML_HEAD_CHUNK,
                file_type=_constants.HTML,
                content=elements,
                directive=LinkDirective.before(self.anchor),
            )
        )
        return structure


__all__ = ["HTML_HEAD_CHUNK", "HtmlHeadPlugin"]
