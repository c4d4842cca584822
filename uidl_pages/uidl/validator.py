"""Schema and content checks run before a UIDL document is compiled.

Schema validation checks the document shape against the typed structures in
:mod:`uidl_pages.uidl.models`. Content validation checks rules the shape cannot
express: style references must name a defined style set, structural nodes need
a template, and node names must be unique within one component.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

import msgspec

from .models import ComponentUIDL, ProjectUIDL, walk

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .parser import Document

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True, frozen=True)
class ValidationResult:
    """Outcome of a validation pass.

    Attributes
    ----------
    valid : bool
        ``True`` when the document passed every check.
    error_msg : str
        Human readable description of every failure, one per line.
    """

    valid: bool
    error_msg: str = ""


class Validator:
    """Validate component and project documents."""

    def validate_component_schema(self, doc: Document) -> ValidationResult:
        """Check that ``doc`` has the shape of a component document."""
        return self._validate_schema(doc, ComponentUIDL)

    def validate_project_schema(self, doc: Document) -> ValidationResult:
        """Check that ``doc`` has the shape of a project document."""
        return self._validate_schema(doc, ProjectUIDL)

    def validate_component_content(
        self, uidl: ComponentUIDL, shared_style_sets: cabc.Collection[str] = ()
    ) -> ValidationResult:
        """Check the semantic rules of a parsed component.

        ``shared_style_sets`` names style sets defined outside the component
        that its nodes may reference.

        Examples
        --------
        >>> from uidl_pages.uidl import parse_component_json
        >>> uidl = parse_component_json(
        ...     {"name": "A", "node": {"type": "text", "styleRefs": ["missing"]}}
        ... )
        >>> Validator().validate_component_content(uidl).valid
        False
        """
        errors: list[str] = []
        seen_names: dict[str, str] = {}
        for path, node in walk(uidl.node):
            if node.is_structural:
                if node.node is None:
                    errors.append(
                        f"{uidl.name}: {node.type} node at {path} has no template node."
                    )
                if node.children:
                    errors.append(
                        f"{uidl.name}: {node.type} node at {path} cannot have children."
                    )
            elif node.node is not None:
                errors.append(
                    f"{uidl.name}: element '{node.type}' at {path} cannot carry a template node."
                )
            for ref in node.style_refs:
                if ref not in uidl.style_set_definitions and ref not in shared_style_sets:
                    errors.append(
                        f"{uidl.name}: style reference '{ref}' at {path} is not defined."
                    )
            if node.name:
                if node.name in seen_names:
                    errors.append(
                        f"{uidl.name}: duplicate node name '{node.name}' at {path} "
                        f"(first used at {seen_names[node.name]})."
                    )
                else:
                    seen_names[node.name] = path
        if errors:
            logger.debug("content validation failed for %s: %d errors", uidl.name, len(errors))
            return ValidationResult(valid=False, error_msg="\n".join(errors))
        return ValidationResult(valid=True)

    @staticmethod
    def _validate_schema(doc: Document, target: type) -> ValidationResult:
        try:
            if isinstance(doc, (str, bytes)):
                msgspec.json.decode(doc, type=target)
            else:
                msgspec.convert(doc, type=target)
        except (msgspec.ValidationError, msgspec.DecodeError) as exc:
            return ValidationResult(
                valid=False, error_msg=f"UIDL schema validation failed: {exc}"
            )
        return ValidationResult(valid=True)


__all__ = ["ValidationResult", "Validator"]
