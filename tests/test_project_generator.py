"""End-to-end tests for project generation, shell rendering, and persistence."""

from __future__ import annotations

import asyncio
import copy
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from uidl_pages.errors import ConfigurationError, PluginError, ValidationError
from uidl_pages.mapping import build_mapping_table
from uidl_pages.plugins import create_html_generator
from uidl_pages.project import (
    ProjectGenerator,
    ProjectPluginCloneGlobals,
    ProjectPluginStructure,
    ShellRenderer,
    write_project,
)
from uidl_pages.uidl import ComponentDependency, parse_project_json

SITE: dict[str, typ.Any] = {
    "name": "Acme",
    "globals": {
        "title": "Acme",
        "language": "fr",
        "metaTags": [{"name": "author", "content": "Acme"}],
        "assets": [
            {"src": "/js/app.js", "placement": "head", "attrs": {"defer": "defer"}},
            {"content": "init();", "placement": "body"},
        ],
    },
    "styleSetDefinitions": {"brand": {"color": "teal"}},
    "pages": [
        {
            "name": "Home",
            "seo": {
                "title": "Welcome",
                "metaTags": [{"name": "description", "content": "Home page"}],
            },
            "node": {
                "type": "container",
                "styleRefs": ["brand"],
                "children": [{"type": "text", "content": "Hello", "style": {"color": "red"}}],
            },
        },
        {"name": "AboutUs", "node": {"type": "paragraph", "content": "About"}},
    ],
    "components": {
        "card": {
            "name": "Card",
            "node": {"type": "container", "children": [{"type": "text", "content": "Card"}]},
        }
    },
}


@pytest.fixture
def site() -> dict[str, typ.Any]:
    return copy.deepcopy(SITE)


def _contents(result_files: dict, key: str, file_type: str = "html") -> str:
    return next(item.content for item in result_files[key].files if item.file_type == file_type)


def test_project_file_map_layout(site: dict) -> None:
    result = asyncio.run(ProjectGenerator().generate_project(site))
    assert set(result.files) == {"home", "about-us", "components/card", "style"}
    assert [item.filename for item in result.files["home"].files] == ["home.html", "home.css"]
    assert result.files["components/card"].path == ["components"]
    assert result.files["style"].path == [""]
    assert _contents(result.files, "style", "css") == ".brand {\n  color: teal;\n}"
    assert _contents(result.files, "home", "css") == ".home-text {\n  color: red;\n}"


def test_pages_are_merged_into_the_shell(site: dict) -> None:
    result = asyncio.run(ProjectGenerator().generate_project(site))
    soup = BeautifulSoup(_contents(result.files, "home"), "html.parser")

    assert soup.html["lang"] == "fr"
    head = soup.head.find_all(True)
    assert head[0].name == "title"
    assert head[0].get_text(strip=True) == "Welcome"
    metas = soup.head.find_all("meta")
    assert metas[0]["name"] == "description"
    assert [meta.get("name") for meta in metas[1:]] == [None, "viewport", "author"]
    assert [link["href"] for link in soup.head.find_all("link")] == [
        "./style.css",
        "./home.css",
    ]
    assert soup.head.find("script")["src"] == "/js/app.js"
    assert soup.head.find("script")["defer"] == "defer"

    body = soup.body.find_all(True, recursive=False)
    assert [tag.name for tag in body] == ["div", "script"]
    assert body[0]["class"] == ["brand"]
    assert body[0].span["class"] == ["home-text"]
    assert body[1].get_text(strip=True) == "init();"


def test_pages_without_seo_fall_back_to_shell_title(site: dict) -> None:
    result = asyncio.run(ProjectGenerator().generate_project(site))
    soup = BeautifulSoup(_contents(result.files, "about-us"), "html.parser")
    assert soup.title.get_text(strip=True) == "Acme"
    assert soup.body.p.get_text(strip=True) == "About"


def test_components_are_not_merged(site: dict) -> None:
    result = asyncio.run(ProjectGenerator().generate_project(site))
    assert _contents(result.files, "components/card") == "<div><span>Card</span></div>"


def test_no_style_folder_without_project_style_sets(site: dict) -> None:
    del site["styleSetDefinitions"]
    site["pages"][0]["node"]["styleRefs"] = []
    result = asyncio.run(ProjectGenerator().generate_project(site))
    assert "style" not in result.files
    soup = BeautifulSoup(_contents(result.files, "about-us"), "html.parser")
    assert soup.find("link") is None


@pytest.mark.parametrize("page_name", ["Entry", "Style"])
def test_reserved_page_names_are_rejected(site: dict, page_name: str) -> None:
    site["pages"].append({"name": page_name, "node": {"type": "container"}})
    with pytest.raises(ConfigurationError, match="reserved"):
        asyncio.run(ProjectGenerator().generate_project(site))


def test_colliding_page_names_are_rejected(site: dict) -> None:
    site["pages"].append({"name": "home", "node": {"type": "container"}})
    with pytest.raises(ConfigurationError, match="already generated"):
        asyncio.run(ProjectGenerator().generate_project(site))


def test_invalid_projects_fail_validation(site: dict) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(ProjectGenerator().generate_project({"name": "Acme", "pages": "home"}))
    site["pages"][1]["node"]["styleRefs"] = ["missing"]
    with pytest.raises(ValidationError, match="missing"):
        asyncio.run(ProjectGenerator().generate_project(site))


def test_hooks_run_in_registration_order(site: dict) -> None:
    seen: list[tuple[str, list[str]]] = []

    class Recorder:
        name = "recorder"

        def run_before(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
            seen.append(("before", sorted(structure.files)))
            return structure

        async def run_after(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
            seen.append(("after", sorted(structure.files)))
            return structure

    generator = ProjectGenerator(plugins=[ProjectPluginCloneGlobals(), Recorder()])
    asyncio.run(generator.generate_project(site))
    assert seen == [
        ("before", []),
        ("after", ["about-us", "components/card", "home", "style"]),
    ]


def test_without_merge_plugin_the_entry_survives(site: dict) -> None:
    result = asyncio.run(ProjectGenerator(plugins=[]).generate_project(site))
    assert "entry" in result.files
    assert result.files["entry"].files[0].filename == "index.html"


def test_failing_hooks_become_plugin_errors(site: dict) -> None:
    class Broken:
        name = "broken"

        def run_before(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
            return structure

        def run_after(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
            msg = "disk full"
            raise OSError(msg)

    generator = ProjectGenerator()
    generator.add_plugin(Broken())
    with pytest.raises(PluginError, match="run_after") as excinfo:
        asyncio.run(generator.generate_project(site))
    assert excinfo.value.plugin_name == "broken"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_dependencies_are_collected_across_pages(site: dict) -> None:
    mapping = build_mapping_table(
        {"elements": {"paragraph": {"tag": "p", "dependency": "typography"}}}
    )
    generator = ProjectGenerator(
        create_html_generator(mappings=[mapping], link_stylesheet=True)
    )
    result = asyncio.run(generator.generate_project(site))
    assert result.dependencies == {"typography": ComponentDependency(name="typography")}


def test_write_project_persists_every_file(site: dict, tmp_path: Path) -> None:
    result = asyncio.run(ProjectGenerator().generate_project(site))
    written = write_project(result.files, tmp_path)
    assert sorted(path.relative_to(tmp_path).as_posix() for path in written) == [
        "about-us.html",
        "components/card.html",
        "home.css",
        "home.html",
        "style.css",
    ]
    for path in written:
        assert path.read_text(encoding="utf-8").endswith("\n")


def test_shell_renderer_escapes_and_places_assets() -> None:
    project = parse_project_json(
        {
            "name": "Docs",
            "globals": {
                "title": "Tips & Tricks",
                "assets": [
                    {"src": "/a.js"},
                    {"src": "/b.js", "placement": "body"},
                ],
            },
        }
    )
    soup = BeautifulSoup(ShellRenderer().render(project), "html.parser")
    assert soup.html["lang"] == "en"
    assert soup.title.string == "Tips & Tricks"
    assert [s["src"] for s in soup.head.find_all("script")] == ["/a.js"]
    assert [s["src"] for s in soup.body.find_all("script")] == ["/b.js"]
    assert "Tips &amp; Tricks" in ShellRenderer().render(project)


def test_shell_title_falls_back_to_project_name() -> None:
    rendered = ShellRenderer().render_file(parse_project_json({"name": "Docs"}))
    assert rendered.filename == "index.html"
    assert BeautifulSoup(rendered.content, "html.parser").title.string == "Docs"
