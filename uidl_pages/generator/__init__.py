"""Resolve, assemble, link, and bundle UIDL components."""

from .assembly_line import (
    AssemblyLine,
    AssemblyResult,
    ComponentPlugin,
    ComponentStructure,
    plugin_name,
)
from .chunks import ChunkDefinition, LinkDirective
from .component_generator import (
    ComponentGenerator,
    PostProcessor,
    bundle_files,
    create_generator,
)
from .linker import ChunkLinker
from .models import CompiledComponent, GeneratedFile
from .resolver import Resolver

__all__ = [
    "AssemblyLine",
    "AssemblyResult",
    "ChunkDefinition",
    "ChunkLinker",
    "CompiledComponent",
    "ComponentGenerator",
    "ComponentPlugin",
    "ComponentStructure",
    "GeneratedFile",
    "LinkDirective",
    "PostProcessor",
    "Resolver",
    "bundle_files",
    "create_generator",
    "plugin_name",
]
