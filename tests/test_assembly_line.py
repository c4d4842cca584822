"""Unit tests for the sequential plugin assembly line."""

from __future__ import annotations

import asyncio
import logging

import pytest

from uidl_pages.errors import ConfigurationError, PluginError
from uidl_pages.generator import (
    AssemblyLine,
    ChunkDefinition,
    ComponentStructure,
    plugin_name,
)
from uidl_pages.uidl import ComponentDependency, ComponentUIDL, UIDLNode


@pytest.fixture
def uidl() -> ComponentUIDL:
    return ComponentUIDL(name="HomePage", node=UIDLNode(type="container", tag="div"))


def _recording(calls: list[str], label: str):
    def plugin(structure: ComponentStructure) -> ComponentStructure:
        calls.append(label)
        structure.chunks.append(ChunkDefinition(name=label, file_type="html", content=label))
        return structure

    plugin.__name__ = label
    return plugin


@pytest.mark.parametrize(
    "node",
    [UIDLNode(type="container"), UIDLNode(type="repeat", node=UIDLNode(type="text"))],
)
def test_zero_plugins_is_a_configuration_error(node: UIDLNode) -> None:
    line = AssemblyLine()
    with pytest.raises(ConfigurationError):
        asyncio.run(line.run(ComponentUIDL(name="Any", node=node)))


def test_plugins_run_in_registration_order(uidl: ComponentUIDL) -> None:
    calls: list[str] = []
    line = AssemblyLine([_recording(calls, "first")])
    line.add_plugin(_recording(calls, "second"))
    result = asyncio.run(line.run(uidl))
    assert calls == ["first", "second"]
    assert [chunk.name for chunk in result.chunks["html"]] == ["first", "second"]


def test_async_plugins_are_awaited(uidl: ComponentUIDL) -> None:
    calls: list[str] = []

    async def fetch_remote(structure: ComponentStructure) -> ComponentStructure:
        await asyncio.sleep(0)
        calls.append("async")
        structure.chunks.append(ChunkDefinition(name="data", file_type="json", content={}))
        return structure

    line = AssemblyLine([fetch_remote, _recording(calls, "sync")])
    result = asyncio.run(line.run(uidl))
    assert calls == ["async", "sync"]
    assert sorted(result.chunks) == ["html", "json"]


def test_failing_plugin_stops_the_line(uidl: ComponentUIDL) -> None:
    calls: list[str] = []

    class Exploding:
        name = "exploding"

        def __call__(self, structure: ComponentStructure) -> ComponentStructure:
            msg = "boom"
            raise RuntimeError(msg)

    line = AssemblyLine([_recording(calls, "first"), Exploding(), _recording(calls, "never")])
    with pytest.raises(PluginError) as excinfo:
        asyncio.run(line.run(uidl))
    assert excinfo.value.plugin_name == "exploding"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "boom" in str(excinfo.value)
    assert calls == ["first"]


def test_plugin_must_return_a_structure(uidl: ComponentUIDL) -> None:
    def forgetful(structure: ComponentStructure) -> None:
        structure.chunks.clear()

    with pytest.raises(PluginError, match="forgetful"):
        asyncio.run(AssemblyLine([forgetful]).run(uidl))


def test_plugins_added_mid_run_do_not_join_in_flight_run(uidl: ComponentUIDL) -> None:
    calls: list[str] = []
    line = AssemblyLine()
    late = _recording(calls, "late")

    def registers_late(structure: ComponentStructure) -> ComponentStructure:
        line.add_plugin(late)
        calls.append("registrar")
        return structure

    line.add_plugin(registers_late)
    asyncio.run(line.run(uidl))
    assert calls == ["registrar"]
    assert line.get_plugins() == [registers_late, late]


def test_get_plugins_returns_a_copy() -> None:
    line = AssemblyLine([_recording([], "only")])
    line.get_plugins().clear()
    assert len(line.get_plugins()) == 1


def test_later_plugins_can_modify_earlier_chunks(uidl: ComponentUIDL) -> None:
    def inject(structure: ComponentStructure) -> ComponentStructure:
        chunk = structure.find_chunk("first")
        assert chunk is not None
        chunk.content = f"{chunk.content}!"
        return structure

    result = asyncio.run(AssemblyLine([_recording([], "first"), inject]).run(uidl))
    assert result.chunks["html"][0].content == "first!"


def test_dependencies_are_deduplicated(
    uidl: ComponentUIDL, caplog: pytest.LogCaptureFixture
) -> None:
    def declare(structure: ComponentStructure) -> ComponentStructure:
        structure.add_dependency(ComponentDependency(name="alpinejs", version="3.14.0"))
        structure.add_dependency(ComponentDependency(name="alpinejs", version="3.14.0"))
        structure.add_dependency(ComponentDependency(name="alpinejs", version="2.0.0"))
        return structure

    with caplog.at_level(logging.WARNING, logger="uidl_pages.generator.assembly_line"):
        result = asyncio.run(AssemblyLine([declare]).run(uidl))
    assert result.external_dependencies == {
        "alpinejs": ComponentDependency(name="alpinejs", version="3.14.0")
    }
    assert "alpinejs" in caplog.text


def test_plugin_name_prefers_name_attribute() -> None:
    class Named:
        name = "named-plugin"

    def bare(structure: ComponentStructure) -> ComponentStructure:
        return structure

    assert plugin_name(Named()) == "named-plugin"
    assert plugin_name(bare) == "bare"
