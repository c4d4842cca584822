"""Turn JSON-shaped documents into typed UIDL trees."""

from __future__ import annotations

import typing as typ

import msgspec

from uidl_pages.errors import ValidationError

from .models import ComponentUIDL, ProjectUIDL

_T = typ.TypeVar("_T")

Document = typ.Mapping[str, typ.Any] | str | bytes


def _convert(doc: Document, target: type[_T]) -> _T:
    """Build ``target`` from a mapping or raw JSON text."""
    try:
        if isinstance(doc, (str, bytes)):
            return msgspec.json.decode(doc, type=target)
        return msgspec.convert(doc, type=target)
    except msgspec.ValidationError as exc:
        msg = f"Invalid {target.__name__} document: {exc}"
        raise ValidationError(msg) from exc
    except msgspec.DecodeError as exc:
        msg = f"Malformed JSON for {target.__name__}: {exc}"
        raise ValidationError(msg) from exc


def parse_component_json(doc: Document) -> ComponentUIDL:
    """Parse a component document into a fresh :class:`ComponentUIDL` tree.

    Every call builds new node objects, so two parses of the same input never
    share nodes.

    Raises
    ------
    ValidationError
        If the document does not match the component schema.
    """
    return _convert(doc, ComponentUIDL)


def parse_project_json(doc: Document) -> ProjectUIDL:
    """Parse a project document into a :class:`ProjectUIDL`."""
    return _convert(doc, ProjectUIDL)


__all__ = ["Document", "parse_component_json", "parse_project_json"]
