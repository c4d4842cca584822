"""High-level orchestration for compiling a whole UIDL project.

:class:`ProjectGenerator` compiles every page into the project root and every
reusable component into ``components/``, renders the shell document into the
reserved ``entry`` folder, writes the shared ``style.css`` when the project
declares style sets, and then lets project plugins (by default the merge
stage in :mod:`uidl_pages.project.clone_globals`) rework the file map.

Example
-------
>>> import asyncio
>>> from uidl_pages.project import ProjectGenerator
>>> project = {
...     "name": "Site",
...     "pages": [{"name": "Home", "node": {"type": "text", "content": "Hi"}}],
... }
>>> result = asyncio.run(ProjectGenerator().generate_project(project))
>>> sorted(result.files)
['home']
"""

from __future__ import annotations

import dataclasses as dc
import inspect
import logging
import typing as typ
from pathlib import Path

import msgspec

from uidl_pages import _constants
from uidl_pages._strings import camel_case_to_dash_case
from uidl_pages.config import GeneratorOptions
from uidl_pages.errors import ConfigurationError, PluginError, ValidationError
from uidl_pages.generator import GeneratedFile, plugin_name
from uidl_pages.generator.chunks import render_style
from uidl_pages.plugins import create_html_generator, style_sheet_rules
from uidl_pages.uidl import Validator, parse_project_json

from .clone_globals import ProjectPluginCloneGlobals
from .models import GeneratedProject, ProjectFolder, ProjectPluginStructure
from .shell import ShellRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from uidl_pages.generator import ComponentGenerator
    from uidl_pages.uidl import ComponentUIDL
    from uidl_pages.uidl.parser import Document

    from .models import ProjectFileMap, ProjectPlugin

logger = logging.getLogger(__name__)

RESERVED_KEYS = frozenset({_constants.ENTRY_FILE_ID, _constants.STYLE_FILE_NAME})


class ProjectGenerator:
    """Compile project documents into a merged project file map."""

    def __init__(
        self,
        component_generator: ComponentGenerator | None = None,
        *,
        plugins: cabc.Iterable[ProjectPlugin] | None = None,
        shell_renderer: ShellRenderer | None = None,
        validator: Validator | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        component_generator : ComponentGenerator, optional
            Generator used for pages and components; defaults to the HTML
            generator with per-page stylesheet links.
        plugins : Iterable[ProjectPlugin], optional
            Project plugins in execution order; defaults to the merge stage.
        shell_renderer : ShellRenderer, optional
            Renderer for the shell document.
        validator : Validator, optional
            Validator for the project schema.
        """
        self.component_generator = component_generator or create_html_generator(
            link_stylesheet=True
        )
        self.plugins: list[ProjectPlugin] = (
            list(plugins) if plugins is not None else [ProjectPluginCloneGlobals()]
        )
        self.shell_renderer = shell_renderer or ShellRenderer()
        self.validator = validator or Validator()

    def add_plugin(self, plugin: ProjectPlugin) -> None:
        """Append a project plugin."""
        self.plugins.append(plugin)

    async def generate_project(
        self, doc: Document, options: GeneratorOptions | None = None
    ) -> GeneratedProject:
        """Compile a project document.

        Raises
        ------
        ValidationError
            If the project or one of its pages is invalid.
        ConfigurationError
            If two pages or components map to the same file, or a page name
            collides with a reserved key.
        PluginError
            If a project plugin fails.
        """
        options = options or GeneratorOptions()
        if not options.skip_validation:
            result = self.validator.validate_project_schema(doc)
            if not result.valid:
                raise ValidationError(result.error_msg)
        project = parse_project_json(doc)

        structure = ProjectPluginStructure(uidl=project)
        plugins = list(self.plugins)
        for plugin in plugins:
            structure = await _run_hook(plugin, "run_before", structure)

        page_options = dc.replace(
            options, shared_style_sets=frozenset(project.style_set_definitions)
        )
        files = structure.files
        for page in project.pages:
            await self._compile_into(
                files, structure, page, list(_constants.ROOT_PATH), page_options
            )
        for component in project.components.values():
            await self._compile_into(
                files, structure, component, list(_constants.COMPONENTS_PATH), page_options
            )

        if project.style_set_definitions:
            files[_constants.STYLE_FILE_NAME] = ProjectFolder(
                path=list(_constants.ROOT_PATH),
                files=[
                    GeneratedFile(
                        name=_constants.STYLE_FILE_NAME,
                        file_type=_constants.CSS,
                        content=render_style(style_sheet_rules(project.style_set_definitions)),
                    )
                ],
            )
        files[_constants.ENTRY_FILE_ID] = ProjectFolder(
            path=list(_constants.ROOT_PATH),
            files=[self.shell_renderer.render_file(project)],
        )

        for plugin in plugins:
            structure = await _run_hook(plugin, "run_after", structure)
        return GeneratedProject(files=structure.files, dependencies=structure.dependencies)

    async def _compile_into(
        self,
        files: ProjectFileMap,
        structure: ProjectPluginStructure,
        component: ComponentUIDL,
        path: list[str],
        options: GeneratorOptions,
    ) -> None:
        key = camel_case_to_dash_case(component.file_name)
        if path != list(_constants.ROOT_PATH):
            key = "/".join([*path, key])
        if key in RESERVED_KEYS:
            msg = f"'{component.name}' maps to the reserved project key '{key}'."
            raise ConfigurationError(msg)
        if key in files:
            msg = f"'{component.name}' maps to '{key}', which is already generated."
            raise ConfigurationError(msg)

        compiled = await self.component_generator.generate_component(
            msgspec.to_builtins(component), options
        )
        files[key] = ProjectFolder(path=path, files=compiled.files)
        for name, dependency in compiled.dependencies.items():
            structure.dependencies.setdefault(name, dependency)
        logger.debug("compiled %s into %s", component.name, key)


async def _run_hook(
    plugin: ProjectPlugin, hook: str, structure: ProjectPluginStructure
) -> ProjectPluginStructure:
    name = plugin_name(plugin)
    try:
        result = getattr(plugin, hook)(structure)
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        raise PluginError(name, f"{hook}: {type(exc).__name__}: {exc}") from exc
    if not isinstance(result, ProjectPluginStructure):
        raise PluginError(
            name, f"{hook} returned {type(result).__name__}, not a ProjectPluginStructure"
        )
    return result


def write_project(files: ProjectFileMap, output_dir: Path) -> list[Path]:
    """Write every file of ``files`` below ``output_dir``.

    Returns
    -------
    list[Path]
        Paths of the written files, in file-map order.
    """
    written: list[Path] = []
    for folder in files.values():
        target_dir = output_dir.joinpath(*[segment for segment in folder.path if segment])
        target_dir.mkdir(parents=True, exist_ok=True)
        for generated in folder.files:
            output_path = target_dir / generated.filename
            content = generated.content
            if not content.endswith("\n"):
                content += "\n"
            output_path.write_text(content, encoding="utf-8")
            written.append(output_path)
    return written


__all__ = ["RESERVED_KEYS", "ProjectGenerator", "write_project"]
