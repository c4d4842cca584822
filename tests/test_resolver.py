"""Unit tests for layered mapping-table resolution."""

from __future__ import annotations

import msgspec
import pytest

from uidl_pages.config import GeneratorOptions
from uidl_pages.errors import ResolutionError
from uidl_pages.generator import Resolver
from uidl_pages.mapping import build_mapping_table, load_base_mapping
from uidl_pages.uidl import ComponentDependency, UIDLNode, parse_component_json


@pytest.fixture
def resolver() -> Resolver:
    return Resolver([load_base_mapping()])


def test_resolves_base_types(resolver: Resolver, home_page_doc: dict) -> None:
    uidl = resolver.resolve_uidl(parse_component_json(home_page_doc))
    assert uidl.node.tag == "div"
    assert uidl.node.children[0].tag == "span"
    assert uidl.node.style_strategy == "class"


def test_unknown_type_names_type_and_path(resolver: Resolver) -> None:
    uidl = parse_component_json(
        {
            "name": "HomePage",
            "node": {"type": "container", "children": [{"type": "widget"}]},
        }
    )
    with pytest.raises(ResolutionError) as excinfo:
        resolver.resolve_uidl(uidl)
    assert excinfo.value.element_type == "widget"
    assert excinfo.value.path == "HomePage:node.children[0]"
    assert "widget" in str(excinfo.value)


def test_unknown_type_inside_template_fails(resolver: Resolver) -> None:
    uidl = parse_component_json(
        {
            "name": "List",
            "node": {"type": "repeat", "dataSource": 2, "node": {"type": "widget"}},
        }
    )
    with pytest.raises(ResolutionError, match=r"List:node\.node"):
        resolver.resolve_uidl(uidl)


def test_add_mapping_shadows_base_table(resolver: Resolver, home_page_doc: dict) -> None:
    resolver.add_mapping({"elements": {"text": {"tag": "p", "attrs": {"role": "note"}}}})
    uidl = resolver.resolve_uidl(parse_component_json(home_page_doc))
    text = uidl.node.children[0]
    assert text.tag == "p"
    assert text.attrs == {"role": "note"}
    # Types absent from the new table still fall through to the base table.
    assert uidl.node.tag == "div"


def test_later_tables_win_over_earlier(resolver: Resolver) -> None:
    resolver.add_mapping(build_mapping_table({"elements": {"text": "em"}}, name="first"))
    resolver.add_mapping(build_mapping_table({"elements": {"text": "strong"}}, name="second"))
    node = resolver.resolve_element(UIDLNode(type="text"))
    assert node.tag == "strong"
    assert [table.name for table in resolver.tables] == ["html", "first", "second"]


def test_add_mapping_only_affects_future_resolutions(resolver: Resolver) -> None:
    before = resolver.resolve_element(UIDLNode(type="text"))
    resolver.add_mapping({"elements": {"text": "em"}})
    after = resolver.resolve_element(UIDLNode(type="text"))
    assert before.tag == "span"
    assert after.tag == "em"


def test_option_mapping_has_highest_precedence(resolver: Resolver) -> None:
    resolver.add_mapping({"elements": {"text": "em"}})
    options = GeneratorOptions(mapping=build_mapping_table({"elements": {"text": "b"}}))
    assert resolver.resolve_element(UIDLNode(type="text"), options).tag == "b"
    # The per-call table is not retained.
    assert resolver.resolve_element(UIDLNode(type="text")).tag == "em"


def test_node_values_win_over_mapping_defaults(resolver: Resolver) -> None:
    resolver.add_mapping(
        {
            "elements": {
                "banner": {
                    "tag": "section",
                    "attrs": {"role": "banner", "hidden": False},
                    "style": {"color": "black", "margin": 0},
                }
            }
        }
    )
    node = resolver.resolve_element(
        UIDLNode(
            type="banner",
            attrs={"hidden": True},
            style={"color": "red"},
            style_refs=["brand"],
        )
    )
    assert node.attrs == {"role": "banner", "hidden": True}
    assert node.style == {"color": "red", "margin": 0}
    assert node.style_refs == ["brand"]


def test_events_and_attributes_are_renamed(resolver: Resolver) -> None:
    node = resolver.resolve_element(
        UIDLNode(
            type="label",
            attrs={"htmlFor": "email", "className": "field"},
            events={"click": "focusField()"},
        )
    )
    assert node.attrs == {"for": "email", "class": "field"}
    assert node.events == {"onclick": "focusField()"}


def test_mapping_defaults_are_applied(resolver: Resolver) -> None:
    node = resolver.resolve_element(UIDLNode(type="image", attrs={"src": "logo.png"}))
    assert node.tag == "img"
    assert node.attrs == {"alt": "", "src": "logo.png"}


def test_dependency_is_attached(resolver: Resolver) -> None:
    resolver.add_mapping(
        {
            "elements": {
                "chart": {
                    "tag": "canvas",
                    "dependency": {"name": "chart.js", "version": "4.4.0"},
                }
            }
        }
    )
    node = resolver.resolve_element(UIDLNode(type="chart"))
    assert node.dependency == ComponentDependency(name="chart.js", version="4.4.0")


def test_structural_nodes_keep_their_type(resolver: Resolver) -> None:
    uidl = parse_component_json(
        {
            "name": "Toggle",
            "node": {"type": "conditional", "condition": True, "node": {"type": "text"}},
        }
    )
    resolved = resolver.resolve_uidl(uidl)
    assert resolved.node.type == "conditional"
    assert resolved.node.tag is None
    assert resolved.node.node is not None
    assert resolved.node.node.tag == "span"


def test_resolving_fresh_copies_is_idempotent(resolver: Resolver, home_page_doc: dict) -> None:
    first = resolver.resolve_uidl(parse_component_json(home_page_doc))
    second = resolver.resolve_uidl(parse_component_json(home_page_doc))
    assert msgspec.to_builtins(first) == msgspec.to_builtins(second)
    assert first.node is not second.node
    assert first.node.children[0] is not second.node.children[0]
