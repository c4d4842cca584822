"""Typed dataclasses describing generator options and configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    from uidl_pages.mapping import MappingTable


@dc.dataclass(slots=True)
class GeneratorOptions:
    """Per-call options for ``generate_component``.

    Attributes
    ----------
    skip_validation : bool
        Skip schema validation. Content validation always runs.
    mapping : MappingTable, optional
        Extra mapping table that shadows every registered table for this call
        only. Passed through to the resolver unchanged.
    shared_style_sets : frozenset[str]
        Style sets defined outside the component (at project level). Style
        references to them are valid; their rules are not emitted per component.
    extra : dict[str, Any]
        Free-form values read by custom plugins.
    """

    skip_validation: bool = False
    mapping: MappingTable | None = None
    shared_style_sets: frozenset[str] = frozenset()
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class GeneratorConfig:
    """Settings loaded from a ``uidl.yaml`` file for command-line builds."""

    mapping_paths: list[Path] = dc.field(default_factory=list)
    output_dir: Path = Path("dist")
    skip_validation: bool = False
    pretty: bool = True

    def options(self) -> GeneratorOptions:
        """Return the per-call options implied by this configuration."""
        return GeneratorOptions(skip_validation=self.skip_validation)


__all__ = ["GeneratorConfig", "GeneratorOptions"]
