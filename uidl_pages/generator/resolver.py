"""Rewrite abstract UIDL nodes into concrete, output-ready elements.

The resolver keeps an ordered stack of mapping tables. Lookups walk the stack
from the most recently added table down to the base table, so later tables
shadow earlier ones key by key without merging them into a single object.

Example
-------
>>> from uidl_pages.mapping import build_mapping_table
>>> from uidl_pages.uidl import UIDLNode
>>> resolver = Resolver([build_mapping_table({"elements": {"text": "span"}})])
>>> resolver.resolve_element(UIDLNode(type="text")).tag
'span'
"""

from __future__ import annotations

import logging
import typing as typ

from uidl_pages.errors import ResolutionError
from uidl_pages.mapping import MappingEntry, MappingTable, build_mapping_table

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from uidl_pages.config import GeneratorOptions
    from uidl_pages.uidl import ComponentUIDL, UIDLNode

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve UIDL trees against a layered set of mapping tables."""

    def __init__(self, mappings: cabc.Iterable[MappingTable] = ()) -> None:
        self._tables: list[MappingTable] = list(mappings)

    @property
    def tables(self) -> tuple[MappingTable, ...]:
        """Return the registered tables, lowest precedence first."""
        return tuple(self._tables)

    def add_mapping(self, table: MappingTable | cabc.Mapping[str, typ.Any]) -> None:
        """Register ``table`` above every table added so far.

        Only resolutions started after this call see the new table.
        """
        if not isinstance(table, MappingTable):
            table = build_mapping_table(table)
        self._tables.append(table)
        logger.debug("added mapping table %r (%d layers)", table.name, len(self._tables))

    def resolve_uidl(
        self, uidl: ComponentUIDL, options: GeneratorOptions | None = None
    ) -> ComponentUIDL:
        """Resolve every node of ``uidl`` in place and return it.

        Parameters
        ----------
        uidl : ComponentUIDL
            Freshly parsed component; its nodes are rewritten in place.
        options : GeneratorOptions, optional
            Per-call options. ``options.mapping`` shadows every registered
            table for this call only.

        Raises
        ------
        ResolutionError
            If a node type is absent from every table.
        """
        layers = self._layers(options)
        self._resolve_node(uidl.node, layers, f"{uidl.name}:node")
        return uidl

    def resolve_element(
        self, node: UIDLNode, options: GeneratorOptions | None = None
    ) -> UIDLNode:
        """Resolve a single node (and its subtree) created outside a tree walk."""
        self._resolve_node(node, self._layers(options), node.name or node.type)
        return node

    def _layers(self, options: GeneratorOptions | None) -> list[MappingTable]:
        """Return the lookup stack, highest precedence first."""
        layers = list(reversed(self._tables))
        if options is not None and options.mapping is not None:
            layers.insert(0, options.mapping)
        return layers

    def _resolve_node(
        self, node: UIDLNode, layers: list[MappingTable], path: str
    ) -> None:
        if node.is_structural:
            if node.node is not None:
                self._resolve_node(node.node, layers, f"{path}.node")
        else:
            entry = _lookup_element(layers, node.type)
            if entry is None:
                raise ResolutionError(node.type, path)
            _apply_entry(node, entry, layers)
        for index, child in enumerate(node.children):
            self._resolve_node(child, layers, f"{path}.children[{index}]")


def _lookup_element(layers: list[MappingTable], element_type: str) -> MappingEntry | None:
    for table in layers:
        entry = table.elements.get(element_type)
        if entry is not None:
            return entry
    return None


def _lookup_name(layers: list[MappingTable], field: str, name: str) -> str:
    """Return the renamed event/attribute for ``name`` or ``name`` itself."""
    for table in layers:
        renamed = getattr(table, field).get(name)
        if renamed is not None:
            return renamed
    return name


def _apply_entry(
    node: UIDLNode, entry: MappingEntry, layers: list[MappingTable]
) -> None:
    """Rewrite ``node`` using ``entry``; node values win over mapping defaults."""
    node.tag = entry.tag
    node.style_strategy = entry.style_strategy
    attrs = {_lookup_name(layers, "attributes", key): value for key, value in entry.attrs.items()}
    for key, value in node.attrs.items():
        attrs[_lookup_name(layers, "attributes", key)] = value
    node.attrs = attrs
    node.events = {
        _lookup_name(layers, "events", event): handler
        for event, handler in node.events.items()
    }
    node.style = {**entry.style, **node.style}
    if entry.dependency is not None and node.dependency is None:
        node.dependency = entry.dependency


__all__ = ["Resolver"]
