"""Dataclasses and hook protocol shared by project generation."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from uidl_pages import _constants

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from uidl_pages.generator import GeneratedFile
    from uidl_pages.uidl import ComponentDependency, ProjectUIDL


@dc.dataclass(slots=True)
class ProjectFolder:
    """Generated files that share one output location.

    Attributes
    ----------
    path : list[str]
        Path segments below the project root; ``[""]`` is the root itself.
    files : list[GeneratedFile]
        Files written into that location, in order.
    """

    path: list[str]
    files: list[GeneratedFile] = dc.field(default_factory=list)

    @property
    def is_root(self) -> bool:
        """Return True when the folder denotes the project root."""
        return tuple(self.path) == _constants.ROOT_PATH


ProjectFileMap = dict[str, ProjectFolder]


@dc.dataclass(slots=True)
class ProjectPluginStructure:
    """State handed to project plugins before and after page compilation."""

    uidl: ProjectUIDL
    files: ProjectFileMap = dc.field(default_factory=dict)
    dependencies: dict[str, ComponentDependency] = dc.field(default_factory=dict)


class ProjectPlugin(typ.Protocol):
    """Hooks run around page compilation; either may be ``async``."""

    def run_before(
        self, structure: ProjectPluginStructure
    ) -> ProjectPluginStructure | cabc.Awaitable[ProjectPluginStructure]: ...

    def run_after(
        self, structure: ProjectPluginStructure
    ) -> ProjectPluginStructure | cabc.Awaitable[ProjectPluginStructure]: ...


@dc.dataclass(slots=True)
class GeneratedProject:
    """Final project artifact: the merged file map and its dependencies."""

    files: ProjectFileMap
    dependencies: dict[str, ComponentDependency] = dc.field(default_factory=dict)


__all__ = [
    "GeneratedProject",
    "ProjectFileMap",
    "ProjectFolder",
    "ProjectPlugin",
    "ProjectPluginStructure",
]
