"""Shared fixtures for the uidl_pages test suite."""

from __future__ import annotations

import typing as typ

import pytest

from uidl_pages.generator import ChunkDefinition, create_generator
from uidl_pages.plugins import create_html_generator

if typ.TYPE_CHECKING:
    from uidl_pages.generator import ComponentGenerator, ComponentPlugin, ComponentStructure

MarkupPluginFactory = typ.Callable[..., "ComponentPlugin"]


def _emit_markup(text: str, name: str = "html-template") -> ComponentPlugin:
    """Return a plugin appending one raw ``html`` chunk holding ``text``."""

    def plugin(structure: ComponentStructure) -> ComponentStructure:
        structure.chunks.append(ChunkDefinition(name=name, file_type="html", content=text))
        return structure

    plugin.__name__ = f"emit-{name}"
    return plugin


@pytest.fixture
def markup_plugin() -> MarkupPluginFactory:
    """Return a factory for plugins that emit a fixed markup chunk."""
    return _emit_markup


@pytest.fixture
def home_page_doc() -> dict[str, typ.Any]:
    """Return the smallest interesting component document."""
    return {
        "name": "HomePage",
        "node": {
            "type": "container",
            "children": [{"type": "text", "content": "Hi"}],
        },
    }


@pytest.fixture
def html_generator() -> ComponentGenerator:
    """Return the bundled HTML generator without stylesheet links."""
    return create_html_generator()


@pytest.fixture
def raw_generator() -> ComponentGenerator:
    """Return a generator with a single plugin emitting ``<div>Hi</div>``."""
    return create_generator(plugins=[_emit_markup("<div>Hi</div>")])
