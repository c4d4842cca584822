"""Shared dataclasses produced by the component generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from uidl_pages import _constants

if typ.TYPE_CHECKING:
    from uidl_pages.uidl import ComponentDependency


@dc.dataclass(slots=True)
class GeneratedFile:
    """A named text artifact of one output kind.

    Attributes
    ----------
    name : str
        Dash-case file name without extension.
    file_type : str
        Output kind, also used as the file extension.
    content : str
        Final text after linking and post-processing.
    """

    name: str
    file_type: str
    content: str

    @property
    def filename(self) -> str:
        """Return ``name.file_type``."""
        return _constants.FILE_NAME_TEMPLATE.format(
            name=self.name, file_type=self.file_type
        )


@dc.dataclass(slots=True)
class CompiledComponent:
    """Result of a single ``generate_component`` call."""

    files: list[GeneratedFile]
    dependencies: dict[str, ComponentDependency] = dc.field(default_factory=dict)

    def get_file(self, file_type: str) -> GeneratedFile | None:
        """Return the file of ``file_type`` if one was generated."""
        return next((item for item in self.files if item.file_type == file_type), None)


__all__ = ["CompiledComponent", "GeneratedFile"]
