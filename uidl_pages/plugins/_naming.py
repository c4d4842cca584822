"""Deterministic CSS class names shared by the markup and style plugins."""

from __future__ import annotations

import typing as typ

from uidl_pages._strings import slugify
from uidl_pages.uidl import walk

if typ.TYPE_CHECKING:
    from uidl_pages.uidl import ComponentUIDL


def style_set_class(name: str) -> str:
    """Return the class name that materializes the style set ``name``."""
    return slugify(name) or "style-set"


def node_class_names(uidl: ComponentUIDL) -> dict[int, str]:
    """Map ``id(node)`` to a unique class for every class-strategy styled node.

    Both plugins call this on the same resolved tree, so the markup and the
    stylesheet agree on names without sharing state.
    """
    names: dict[int, str] = {}
    used: set[str] = set()
    prefix = slugify(uidl.name) or "component"
    for _path, node in walk(uidl.node):
        if node.is_structural or not node.style or node.style_strategy != "class":
            continue
        base = slugify(node.name) if node.name else f"{prefix}-{slugify(node.type)}"
        names[id(node)] = _unique_name(base, used)
    return names


def _unique_name(base: str, used: set[str]) -> str:
    """Return a unique name, appending numeric suffixes and mutating ``used``."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = ["node_class_names", "style_set_class"]
