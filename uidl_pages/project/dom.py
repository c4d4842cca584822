"""Narrow document-manipulation interface used by the merge stage.

The merge algorithm only needs to query elements by tag within a scope,
remove them, insert markup at either end of a scope, clear a scope, and
serialize. :class:`MarkupDocument` captures exactly that; :class:`SoupDocument`
implements it with BeautifulSoup.
"""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup
from bs4.element import Doctype

if typ.TYPE_CHECKING:
    from bs4.element import Tag

Scope = typ.Literal["head", "body"] | None


class MarkupDocument(typ.Protocol):
    """Operations the merge stage performs on a parsed document or fragment."""

    def select(self, tag: str, scope: Scope = None) -> str:
        """Return the serialized elements named ``tag`` inside ``scope``."""
        ...

    def remove(self, tag: str, scope: Scope = None) -> None:
        """Remove every element named ``tag`` inside ``scope``."""
        ...

    def append(self, scope: Scope, markup: str) -> None:
        """Insert ``markup`` at the end of ``scope``."""
        ...

    def prepend(self, scope: Scope, markup: str) -> None:
        """Insert ``markup`` at the start of ``scope``."""
        ...

    def empty(self, scope: Scope) -> None:
        """Remove every child of ``scope``."""
        ...

    def inner_html(self, scope: Scope = None) -> str:
        """Return the serialized children of ``scope``."""
        ...

    def html(self) -> str:
        """Return the whole serialized document."""
        ...


class DocumentParser(typ.Protocol):
    """Factory producing :class:`MarkupDocument` objects."""

    def parse_document(self, markup: str) -> MarkupDocument:
        """Parse a full document, guaranteeing ``head`` and ``body`` scopes."""
        ...

    def parse_fragment(self, markup: str) -> MarkupDocument:
        """Parse a markup fragment without adding any wrapper elements."""
        ...


class SoupDocument:
    """BeautifulSoup-backed :class:`MarkupDocument`.

    ``None`` scopes address the whole document. For fragments that happen to
    contain a ``<body>``, :meth:`inner_html` returns the body's children.
    """

    def __init__(
        self, markup: str, *, fragment: bool = False, features: str = "html.parser"
    ) -> None:
        self.features = features
        self.fragment = fragment
        self.soup = BeautifulSoup(markup, features)
        if not fragment:
            self._ensure_skeleton()

    def select(self, tag: str, scope: Scope = None) -> str:
        """Return the serialized elements named ``tag`` inside ``scope``."""
        return "".join(str(element) for element in self._scope(scope).find_all(tag))

    def remove(self, tag: str, scope: Scope = None) -> None:
        """Remove every element named ``tag`` inside ``scope``."""
        for element in self._scope(scope).find_all(tag):
            element.decompose()

    def append(self, scope: Scope, markup: str) -> None:
        """Insert ``markup`` at the end of ``scope``."""
        parent = self._scope(scope)
        for child in self._parse_children(markup):
            parent.append(child)

    def prepend(self, scope: Scope, markup: str) -> None:
        """Insert ``markup`` at the start of ``scope``, keeping its order."""
        parent = self._scope(scope)
        for child in reversed(self._parse_children(markup)):
            parent.insert(0, child)

    def empty(self, scope: Scope) -> None:
        """Remove every child of ``scope``."""
        self._scope(scope).clear()

    def inner_html(self, scope: Scope = None) -> str:
        """Return the serialized children of ``scope``."""
        node: Tag = self._scope(scope)
        if scope is None and self.fragment and self.soup.body is not None:
            node = self.soup.body
        return node.decode_contents()

    def html(self) -> str:
        """Return the whole serialized document."""
        return str(self.soup)

    def _scope(self, scope: Scope) -> Tag:
        if scope is None:
            return self.soup
        element = self.soup.find(scope)
        if element is None:
            return self.soup
        return element

    def _parse_children(self, markup: str) -> list[typ.Any]:
        if not markup:
            return []
        fragment = BeautifulSoup(markup, self.features)
        return [child.extract() for child in list(fragment.contents)]

    def _ensure_skeleton(self) -> None:
        """Make sure ``html``, ``head``, and ``body`` elements exist."""
        soup = self.soup
        root = soup.find("html")
        if root is None:
            root = soup.new_tag("html")
            for child in list(soup.contents):
                if not isinstance(child, Doctype):
                    root.append(child.extract())
            soup.append(root)
        head = root.find("head")
        if head is None:
            head = soup.new_tag("head")
            root.insert(0, head)
        if root.find("body") is None:
            body = soup.new_tag("body")
            for child in list(root.contents):
                if child is not head:
                    body.append(child.extract())
            root.append(body)


class SoupDocumentParser:
    """:class:`DocumentParser` producing :class:`SoupDocument` objects."""

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def parse_document(self, markup: str) -> SoupDocument:
        """Parse a full document, guaranteeing ``head`` and ``body`` scopes."""
        return SoupDocument(markup, features=self.features)

    def parse_fragment(self, markup: str) -> SoupDocument:
        """Parse a markup fragment without adding any wrapper elements."""
        return SoupDocument(markup, fragment=True, features=self.features)


__all__ = [
    "DocumentParser",
    "MarkupDocument",
    "Scope",
    "SoupDocument",
    "SoupDocumentParser",
]
