"""Project-level generation: pages, the shared shell, and the merge stage."""

from .clone_globals import STYLESHEET_LINK, ProjectPluginCloneGlobals
from .dom import DocumentParser, MarkupDocument, SoupDocument, SoupDocumentParser
from .formatter import Formatter, prettify_html
from .generator import RESERVED_KEYS, ProjectGenerator, write_project
from .models import (
    GeneratedProject,
    ProjectFileMap,
    ProjectFolder,
    ProjectPlugin,
    ProjectPluginStructure,
)
from .shell import ShellRenderer

__all__ = [
    "RESERVED_KEYS",
    "STYLESHEET_LINK",
    "DocumentParser",
    "Formatter",
    "GeneratedProject",
    "MarkupDocument",
    "ProjectFileMap",
    "ProjectFolder",
    "ProjectGenerator",
    "ProjectPlugin",
    "ProjectPluginCloneGlobals",
    "ProjectPluginStructure",
    "ShellRenderer",
    "SoupDocument",
    "SoupDocumentParser",
    "prettify_html",
    "write_project",
]
