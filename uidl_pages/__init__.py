"""Compile declarative UIDL component trees into HTML, CSS, and merged pages.

The package resolves abstract UIDL element types through layered mapping
tables, runs an ordered plugin assembly line that produces anchorable chunks,
links the chunks per output kind, post-processes and bundles the files, and,
at project scope, merges every page into one shared shell document.

Exports
-------
- ``create_generator``: component generator over the bundled HTML mapping.
- ``create_html_generator``: the same, wired with the bundled HTML plugins.
- ``ProjectGenerator``: compiles project documents into merged pages.
- ``app``/``main``: the ``uidl`` command-line interface.

Examples
--------
>>> import asyncio
>>> from uidl_pages import create_html_generator
>>> generator = create_html_generator()
>>> doc = {"name": "HomePage", "node": {"type": "text", "content": "Hi"}}
>>> asyncio.run(generator.generate_component(doc)).files[0].content
'<span>Hi</span>'
"""

from __future__ import annotations

from .cli import app, main
from .errors import (
    ConfigurationError,
    LinkError,
    PluginError,
    ResolutionError,
    UIDLError,
    ValidationError,
)
from .generator import ComponentGenerator, create_generator
from .plugins import create_html_generator
from .project import ProjectGenerator

__all__ = [
    "ComponentGenerator",
    "ConfigurationError",
    "LinkError",
    "PluginError",
    "ProjectGenerator",
    "ResolutionError",
    "UIDLError",
    "ValidationError",
    "app",
    "create_generator",
    "create_html_generator",
    "main",
]
