"""Render a resolved UIDL tree into an HTML markup chunk."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from uidl_pages import _constants
from uidl_pages.generator.chunks import ChunkDefinition
from uidl_pages.uidl import CONDITIONAL, REPEAT

from ._naming import node_class_names, style_set_class

if typ.TYPE_CHECKING:
    from bs4.element import Tag

    from uidl_pages.generator.assembly_line import ComponentStructure
    from uidl_pages.uidl import UIDLNode, StyleDeclarations

HTML_TEMPLATE_CHUNK = "html-template"


def inline_style(style: StyleDeclarations) -> str:
    """Serialize declarations for a ``style`` attribute.

    Examples
    --------
    >>> inline_style({"color": "red", "width": 10})
    'color: red; width: 10'
    """
    return "; ".join(f"{prop}: {value}" for prop, value in style.items())


class HtmlMarkupPlugin:
    """Emit the component's element tree as a BeautifulSoup fragment.

    ``repeat`` nodes render their template once per data-source item (or the
    given number of times); ``conditional`` nodes render it only when their
    condition is truthy. Dependencies attached to resolved nodes are declared
    on the structure.
    """

    name = "html-markup"

    def __init__(self, *, chunk_name: str = HTML_TEMPLATE_CHUNK) -> None:
        self.chunk_name = chunk_name

    def __call__(self, structure: ComponentStructure) -> ComponentStructure:
        """Append the markup chunk to ``structure``."""
        soup = BeautifulSoup("", "html.parser")
        class_names = node_class_names(structure.uidl)
        for element in self._build(soup, structure.uidl.node, class_names, structure):
            soup.append(element)
        structure.chunks.append(
            ChunkDefinition(name=self.chunk_name, file_type=_constants.HTML, content=soup)
        )
        return structure

    def _build(
        self,
        soup: BeautifulSoup,
        node: UIDLNode,
        class_names: dict[int, str],
        structure: ComponentStructure,
    ) -> list[Tag]:
        if node.type == REPEAT:
            return [
                element
                for _ in range(_repeat_count(node))
                for element in self._build(soup, node.node, class_names, structure)
            ]
        if node.type == CONDITIONAL:
            if not node.condition:
                return []
            return self._build(soup, node.node, class_names, structure)
        if node.tag is None:
            msg = f"Node '{node.name or node.type}' has not been resolved."
            raise ValueError(msg)

        tag = soup.new_tag(node.tag)
        for key, value in node.attrs.items():
            if value is None or value is False:
                continue
            tag[key] = "" if value is True else str(value)
        for event, handler in node.events.items():
            tag[event] = handler

        classes = [style_set_class(ref) for ref in node.style_refs]
        generated = class_names.get(id(node))
        if generated:
            classes.append(generated)
        if classes:
            existing = tag.get("class")
            if isinstance(existing, list):
                existing = " ".join(existing)
            tag["class"] = " ".join([existing, *classes] if existing else classes)
        if node.style and node.style_strategy == "inline":
            tag["style"] = inline_style(node.style)

        if node.dependency is not None:
            structure.add_dependency(node.dependency)
        if node.content is not None:
            tag.append(node.content)
        for child in node.children:
            for element in self._build(soup, child, class_names, structure):
                tag.append(element)
        return [tag]


def _repeat_count(node: UIDLNode) -> int:
    source = node.data_source
    if source is None:
        return 0
    if isinstance(source, int):
        return max(source, 0)
    return len(source)


__all__ = ["HTML_TEMPLATE_CHUNK", "HtmlMarkupPlugin", "inline_style"]
