"""High-level orchestration for compiling one UIDL component.

:class:`ComponentGenerator` wires the stages together: validate the document
(schema, then content), parse it into a fresh tree, resolve element types
against the mapping tables, run the plugin assembly line, link each output
kind's chunks, apply post-processors, and bundle the texts into named files.
Each stage's output is the next stage's input, so the stages run strictly one
after another.

Example
-------
>>> import asyncio
>>> from uidl_pages.generator import create_generator
>>> from uidl_pages.plugins import HtmlMarkupPlugin
>>> generator = create_generator(plugins=[HtmlMarkupPlugin()])
>>> doc = {"name": "HomePage", "node": {"type": "text", "content": "Hi"}}
>>> compiled = asyncio.run(generator.generate_component(doc))
>>> [(item.name, item.file_type) for item in compiled.files]
[('home-page', 'html')]
"""

from __future__ import annotations

import logging
import typing as typ

from uidl_pages._strings import camel_case_to_dash_case
from uidl_pages.config import GeneratorOptions
from uidl_pages.errors import ConfigurationError, ValidationError
from uidl_pages.mapping import load_base_mapping
from uidl_pages.uidl import Validator, parse_component_json

from .assembly_line import AssemblyLine
from .linker import ChunkLinker
from .models import CompiledComponent, GeneratedFile
from .resolver import Resolver

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from uidl_pages.mapping import MappingTable
    from uidl_pages.uidl import UIDLNode
    from uidl_pages.uidl.parser import Document

    from .assembly_line import ComponentPlugin
    from .chunks import ChunkDefinition

logger = logging.getLogger(__name__)

PostProcessor = typ.Callable[[dict[str, str]], dict[str, str]]


class ComponentGenerator:
    """Compile UIDL component documents into generated files."""

    def __init__(
        self,
        *,
        mappings: cabc.Iterable[MappingTable] = (),
        plugins: cabc.Iterable[ComponentPlugin] = (),
        post_processors: cabc.Iterable[PostProcessor] = (),
        validator: Validator | None = None,
        linker: ChunkLinker | None = None,
    ) -> None:
        """Initialize the generator stages.

        Parameters
        ----------
        mappings : Iterable[MappingTable]
            Mapping tables, lowest precedence first.
        plugins : Iterable[ComponentPlugin]
            Plugins in execution order.
        post_processors : Iterable[PostProcessor]
            Whole-file transforms applied after linking, in order.
        validator : Validator, optional
            Schema and content validator; defaults to :class:`Validator`.
        linker : ChunkLinker, optional
            Chunk linker; defaults to one with the built-in renderers.
        """
        self.validator = validator or Validator()
        self.resolver = Resolver(mappings)
        self.assembly_line = AssemblyLine(plugins)
        self.linker = linker or ChunkLinker()
        self.post_processors: list[PostProcessor] = list(post_processors)

    async def generate_component(
        self, doc: Document, options: GeneratorOptions | None = None
    ) -> CompiledComponent:
        """Compile a component document.

        Parameters
        ----------
        doc : Mapping or str or bytes
            JSON-shaped component document, or its raw JSON text.
        options : GeneratorOptions, optional
            Per-call options.

        Returns
        -------
        CompiledComponent
            One file per output kind the plugins produced chunks for, and the
            external dependencies they declared.

        Raises
        ------
        ValidationError
            If schema or content validation fails.
        ResolutionError
            If a node type has no mapping.
        ConfigurationError
            If no plugin is registered.
        PluginError
            If a plugin fails.
        LinkError
            If a chunk cannot be linked.
        """
        if not self.assembly_line.get_plugins():
            msg = "No plugins found. Component generation cannot work without any plugins!"
            raise ConfigurationError(msg)

        options = options or GeneratorOptions()
        if not options.skip_validation:
            schema_result = self.validator.validate_component_schema(doc)
            if not schema_result.valid:
                raise ValidationError(schema_result.error_msg)

        uidl = parse_component_json(doc)

        content_result = self.validator.validate_component_content(
            uidl, options.shared_style_sets
        )
        if not content_result.valid:
            raise ValidationError(content_result.error_msg)

        resolved = self.resolver.resolve_uidl(uidl, options)
        result = await self.assembly_line.run(resolved, options)
        files = self.link_code_chunks(result.chunks, uidl.file_name)
        logger.debug(
            "compiled %s into %d files (%d dependencies)",
            uidl.name,
            len(files),
            len(result.external_dependencies),
        )
        return CompiledComponent(files=files, dependencies=result.external_dependencies)

    def link_code_chunks(
        self, chunks: cabc.Mapping[str, cabc.Sequence[ChunkDefinition]], file_name: str
    ) -> list[GeneratedFile]:
        """Link each output kind, apply post-processors, and bundle the files."""
        code_chunks = {
            file_type: self.linker.link(kind_chunks)
            for file_type, kind_chunks in chunks.items()
        }
        for processor in self.post_processors:
            code_chunks = processor(code_chunks)
        return bundle_files(file_name, code_chunks)

    def resolve_element(
        self, node: UIDLNode, options: GeneratorOptions | None = None
    ) -> UIDLNode:
        """Resolve a node synthesized outside the normal tree walk."""
        return self.resolver.resolve_element(node, options)

    def add_mapping(self, table: MappingTable | cabc.Mapping[str, typ.Any]) -> None:
        """Register a mapping table above every existing one."""
        self.resolver.add_mapping(table)

    def add_plugin(self, plugin: ComponentPlugin) -> None:
        """Append a plugin to the assembly line."""
        self.assembly_line.add_plugin(plugin)

    def add_post_processor(self, processor: PostProcessor) -> None:
        """Append a post-processor; it runs after those already registered."""
        self.post_processors.append(processor)


def bundle_files(file_name: str, code_chunks: cabc.Mapping[str, str]) -> list[GeneratedFile]:
    """Turn ``file type -> text`` into files named after ``file_name``.

    Examples
    --------
    >>> bundle_files("HomePage", {"html": "<div></div>"})[0].name
    'home-page'
    """
    clean_name = camel_case_to_dash_case(file_name)
    return [
        GeneratedFile(name=clean_name, file_type=file_type, content=content)
        for file_type, content in code_chunks.items()
    ]


def create_generator(
    *,
    mappings: cabc.Iterable[MappingTable] = (),
    plugins: cabc.Iterable[ComponentPlugin] = (),
    post_processors: cabc.Iterable[PostProcessor] = (),
) -> ComponentGenerator:
    """Return a generator whose resolver starts from the bundled HTML table."""
    return ComponentGenerator(
        mappings=[load_base_mapping(), *mappings],
        plugins=plugins,
        post_processors=post_processors,
    )


__all__ = [
    "ComponentGenerator",
    "PostProcessor",
    "bundle_files",
    "create_generator",
]
