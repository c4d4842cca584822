"""Typed structures describing UIDL component and project documents.

The structures double as the document schema: ``msgspec.convert`` checks a
JSON-shaped mapping against them while building the tree, so the validator and
the parser share one definition. JSON keys are camelCase (``fileName``,
``styleRefs``) while attributes are snake_case.
"""

from __future__ import annotations

import typing as typ

import msgspec

REPEAT = "repeat"
CONDITIONAL = "conditional"
STRUCTURAL_TYPES = frozenset({REPEAT, CONDITIONAL})

StyleValue = str | int | float
StyleDeclarations = dict[str, StyleValue]


class ComponentDependency(msgspec.Struct, kw_only=True, rename="camel"):
    """External package a generated component relies on."""

    name: str
    version: str = ""
    type: str = "package"


class UIDLNode(msgspec.Struct, kw_only=True, rename="camel"):
    """A single element of a UIDL tree.

    Attributes
    ----------
    type : str
        Abstract element type (``container``, ``text``) or a structural type
        (``repeat``, ``conditional``).
    name : str, optional
        Author supplied identifier, unique within one component.
    content : str, optional
        Text content rendered inside the element.
    attrs : dict[str, Any]
        Attribute values keyed by UIDL attribute name.
    events : dict[str, str]
        Handler references keyed by UIDL event name.
    children : list[UIDLNode]
        Ordered child nodes.
    style : dict[str, str | int | float]
        Inline style declarations.
    style_refs : list[str]
        Names of shared style sets applied to the element.
    node : UIDLNode, optional
        Child template of a structural node.
    data_source : list or int, optional
        Items (or an item count) a ``repeat`` node expands over.
    condition : bool, optional
        Whether a ``conditional`` node renders its template.
    tag, style_strategy, dependency
        Filled in by the resolver.
    """

    type: str
    name: str | None = None
    content: str | None = None
    attrs: dict[str, typ.Any] = msgspec.field(default_factory=dict)
    events: dict[str, str] = msgspec.field(default_factory=dict)
    children: list[UIDLNode] = msgspec.field(default_factory=list)
    style: StyleDeclarations = msgspec.field(default_factory=dict)
    style_refs: list[str] = msgspec.field(default_factory=list)
    node: UIDLNode | None = None
    data_source: list[typ.Any] | int | None = None
    condition: bool | None = None
    tag: str | None = None
    style_strategy: str | None = None
    dependency: ComponentDependency | None = None

    @property
    def is_structural(self) -> bool:
        """Return True for ``repeat`` and ``conditional`` nodes."""
        return self.type in STRUCTURAL_TYPES


class ComponentMeta(msgspec.Struct, kw_only=True, rename="camel"):
    """Naming hints for the generated files."""

    file_name: str | None = None


class ComponentSEO(msgspec.Struct, kw_only=True, rename="camel"):
    """Page-level head data contributed by a component."""

    title: str | None = None
    meta_tags: list[dict[str, str]] = msgspec.field(default_factory=list)


class ComponentUIDL(msgspec.Struct, kw_only=True, rename="camel"):
    """Root of a component document."""

    name: str
    node: UIDLNode
    meta: ComponentMeta | None = None
    seo: ComponentSEO | None = None
    style_set_definitions: dict[str, StyleDeclarations] = msgspec.field(
        default_factory=dict
    )

    @property
    def file_name(self) -> str:
        """Return ``meta.fileName`` when present, otherwise the component name."""
        if self.meta and self.meta.file_name:
            return self.meta.file_name
        return self.name


class GlobalAsset(msgspec.Struct, kw_only=True, rename="camel"):
    """Script shared by every page of a project."""

    src: str | None = None
    content: str | None = None
    placement: typ.Literal["head", "body"] = "head"
    attrs: dict[str, str] = msgspec.field(default_factory=dict)


class ProjectGlobals(msgspec.Struct, kw_only=True, rename="camel"):
    """Document-level settings rendered once into the shell document."""

    title: str = ""
    language: str = "en"
    meta_tags: list[dict[str, str]] = msgspec.field(default_factory=list)
    assets: list[GlobalAsset] = msgspec.field(default_factory=list)


class ProjectUIDL(msgspec.Struct, kw_only=True, rename="camel"):
    """Root of a project document: globals, pages, and reusable components."""

    name: str
    globals: ProjectGlobals = msgspec.field(default_factory=ProjectGlobals)
    style_set_definitions: dict[str, StyleDeclarations] = msgspec.field(
        default_factory=dict
    )
    pages: list[ComponentUIDL] = msgspec.field(default_factory=list)
    components: dict[str, ComponentUIDL] = msgspec.field(default_factory=dict)


def walk(node: UIDLNode, path: str = "node") -> typ.Iterator[tuple[str, UIDLNode]]:
    """Yield ``(path, node)`` pairs depth-first, templates before children.

    Examples
    --------
    >>> tree = UIDLNode(type="container", children=[UIDLNode(type="text")])
    >>> [path for path, _ in walk(tree)]
    ['node', 'node.children[0]']
    """
    yield path, node
    if node.node is not None:
        yield from walk(node.node, f"{path}.node")
    for index, child in enumerate(node.children):
        yield from walk(child, f"{path}.children[{index}]")


__all__ = [
    "CONDITIONAL",
    "REPEAT",
    "STRUCTURAL_TYPES",
    "ComponentDependency",
    "ComponentMeta",
    "ComponentSEO",
    "ComponentUIDL",
    "GlobalAsset",
    "ProjectGlobals",
    "ProjectUIDL",
    "StyleDeclarations",
    "StyleValue",
    "UIDLNode",
    "walk",
]
