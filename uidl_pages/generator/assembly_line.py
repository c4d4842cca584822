"""Run component plugins in order over a shared accumulator.

Plugins are plain or ``async`` callables taking a :class:`ComponentStructure`
and returning it (or a replacement). They run one at a time in registration
order; a plugin that awaits something suspends the whole line, so no other
plugin ever observes a half-finished accumulator.
"""

from __future__ import annotations

import dataclasses as dc
import inspect
import logging
import typing as typ

from uidl_pages.config import GeneratorOptions
from uidl_pages.errors import ConfigurationError, PluginError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from uidl_pages.uidl import ComponentDependency, ComponentUIDL

    from .chunks import ChunkDefinition

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class ComponentStructure:
    """Accumulator handed from plugin to plugin.

    Attributes
    ----------
    uidl : ComponentUIDL
        The resolved component tree.
    options : GeneratorOptions
        Options of the current compilation call.
    chunks : list[ChunkDefinition]
        Chunks produced so far, in production order.
    dependencies : dict[str, ComponentDependency]
        External dependencies keyed by package name.
    """

    uidl: ComponentUIDL
    options: GeneratorOptions
    chunks: list[ChunkDefinition] = dc.field(default_factory=list)
    dependencies: dict[str, ComponentDependency] = dc.field(default_factory=dict)

    def add_dependency(self, dependency: ComponentDependency) -> None:
        """Record ``dependency`` once; the first declaration of a name wins."""
        existing = self.dependencies.get(dependency.name)
        if existing is None:
            self.dependencies[dependency.name] = dependency
        elif existing.version != dependency.version:
            logger.warning(
                "dependency %s declared as %r and %r; keeping %r",
                dependency.name,
                existing.version,
                dependency.version,
                existing.version,
            )

    def find_chunk(self, name: str) -> ChunkDefinition | None:
        """Return the chunk called ``name``, if an earlier plugin produced it."""
        return next((chunk for chunk in self.chunks if chunk.name == name), None)


ComponentPlugin = typ.Callable[
    [ComponentStructure],
    "ComponentStructure | cabc.Awaitable[ComponentStructure]",
]


@dc.dataclass(slots=True)
class AssemblyResult:
    """Chunks grouped by output kind plus the collected dependencies."""

    chunks: dict[str, list[ChunkDefinition]]
    external_dependencies: dict[str, ComponentDependency]


def plugin_name(plugin: object) -> str:
    """Return a readable identity for ``plugin``."""
    name = getattr(plugin, "name", None)
    if isinstance(name, str) and name:
        return name
    return getattr(plugin, "__name__", type(plugin).__name__)


class AssemblyLine:
    """Ordered list of plugins plus a sequential executor."""

    def __init__(self, plugins: cabc.Iterable[ComponentPlugin] = ()) -> None:
        self._plugins: list[ComponentPlugin] = list(plugins)

    def add_plugin(self, plugin: ComponentPlugin) -> None:
        """Append ``plugin``; runs already in flight keep their own list."""
        self._plugins.append(plugin)

    def get_plugins(self) -> list[ComponentPlugin]:
        """Return a copy of the registered plugins in execution order."""
        return list(self._plugins)

    async def run(
        self, uidl: ComponentUIDL, options: GeneratorOptions | None = None
    ) -> AssemblyResult:
        """Run every plugin over ``uidl`` and group the resulting chunks.

        Raises
        ------
        ConfigurationError
            If no plugin is registered.
        PluginError
            If a plugin raises or returns something other than a structure.
            The original exception is chained as ``__cause__``.
        """
        plugins = self.get_plugins()
        if not plugins:
            msg = "No plugins found. Component generation cannot work without any plugins!"
            raise ConfigurationError(msg)

        structure = ComponentStructure(uidl=uidl, options=options or GeneratorOptions())
        for plugin in plugins:
            name = plugin_name(plugin)
            logger.debug("running plugin %s on %s", name, uidl.name)
            try:
                result = plugin(structure)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:
                raise PluginError(name, f"{type(exc).__name__}: {exc}") from exc
            if not isinstance(result, ComponentStructure):
                raise PluginError(
                    name, f"expected a ComponentStructure, got {type(result).__name__}"
                )
            structure = result

        grouped: dict[str, list[ChunkDefinition]] = {}
        for chunk in structure.chunks:
            grouped.setdefault(chunk.file_type, []).append(chunk)
        return AssemblyResult(
            chunks=grouped, external_dependencies=dict(structure.dependencies)
        )


__all__ = [
    "AssemblyLine",
    "AssemblyResult",
    "ComponentPlugin",
    "ComponentStructure",
    "plugin_name",
]
