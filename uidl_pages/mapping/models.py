"""Typed dataclasses describing element mapping tables."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from uidl_pages.uidl import ComponentDependency

StyleStrategy = typ.Literal["class", "inline"]
STYLE_STRATEGIES: frozenset[str] = frozenset({"class", "inline"})


@dc.dataclass(slots=True)
class MappingEntry:
    """Rule turning one abstract element type into a concrete tag.

    Attributes
    ----------
    tag : str
        Concrete output tag name.
    attrs : dict[str, Any]
        Default attributes; node attributes are applied on top.
    style : dict[str, str | int | float]
        Default style declarations; node styles are applied on top.
    style_strategy : str
        ``"class"`` to materialize styles as a CSS class or ``"inline"`` to
        emit a ``style`` attribute.
    dependency : ComponentDependency, optional
        External package the element needs.
    """

    tag: str
    attrs: dict[str, typ.Any] = dc.field(default_factory=dict)
    style: dict[str, str | int | float] = dc.field(default_factory=dict)
    style_strategy: StyleStrategy = "class"
    dependency: ComponentDependency | None = None


@dc.dataclass(slots=True)
class MappingTable:
    """One layer of element, event, and attribute rules."""

    name: str = "custom"
    elements: dict[str, MappingEntry] = dc.field(default_factory=dict)
    events: dict[str, str] = dc.field(default_factory=dict)
    attributes: dict[str, str] = dc.field(default_factory=dict)


__all__ = ["STYLE_STRATEGIES", "MappingEntry", "MappingTable", "StyleStrategy"]
