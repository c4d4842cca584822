"""Render style sets and class-strategy node styles into CSS chunks."""

from __future__ import annotations

import typing as typ

from uidl_pages import _constants
from uidl_pages.generator.chunks import ChunkDefinition
from uidl_pages.uidl import walk

from ._naming import node_class_names, style_set_class

if typ.TYPE_CHECKING:
    from uidl_pages.generator.assembly_line import ComponentStructure

STYLE_SETS_CHUNK = "style-sets"
COMPONENT_STYLES_CHUNK = "component-styles"


class CssStylePlugin:
    """Emit ``selector -> declarations`` chunks; emits nothing for unstyled trees."""

    name = "css-styles"

    def __init__(self, *, include_style_sets: bool = True) -> None:
        self.include_style_sets = include_style_sets

    def __call__(self, structure: ComponentStructure) -> ComponentStructure:
        """Append the style-set and component style chunks to ``structure``."""
        uidl = structure.uidl
        if self.include_style_sets and uidl.style_set_definitions:
            rules = style_sheet_rules(uidl.style_set_definitions)
            structure.chunks.append(
                ChunkDefinition(name=STYLE_SETS_CHUNK, file_type=_constants.CSS, content=rules)
            )

        class_names = node_class_names(uidl)
        node_rules = {
            f".{class_names[id(node)]}": dict(node.style)
            for _path, node in walk(uidl.node)
            if id(node) in class_names
        }
        if node_rules:
            structure.chunks.append(
                ChunkDefinition(
                    name=COMPONENT_STYLES_CHUNK, file_type=_constants.CSS, content=node_rules
                )
            )
        return structure


def style_sheet_rules(
    style_set_definitions: typ.Mapping[str, typ.Mapping[str, typ.Any]],
) -> dict[str, dict[str, typ.Any]]:
    """Return project-level style sets as CSS rules keyed by class selector."""
    return {
        f".{style_set_class(name)}": dict(declarations)
        for name, declarations in style_set_definitions.items()
    }


__all__ = [
    "COMPONENT_STYLES_CHUNK",
    "STYLE_SETS_CHUNK",
    "CssStylePlugin",
    "style_sheet_rules",
]
