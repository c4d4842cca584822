"""Render the shared shell document from a project's globals.

:class:`ShellRenderer` loads ``entry.jinja`` from the package templates (or a
custom directory) and renders one HTML document holding the project title,
global meta tags, and global scripts split by placement. The project merge
stage later folds every page into this document.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from uidl_pages import _constants
from uidl_pages.generator import GeneratedFile

if typ.TYPE_CHECKING:
    from uidl_pages.uidl import ProjectUIDL

SHELL_TEMPLATE = "entry.jinja"
SHELL_FILE_NAME = "index"


class ShellRenderer:
    """Render the project shell document with Jinja2."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``entry.jinja``; defaults to the package
            templates.
        """
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(SHELL_TEMPLATE)

    def render(self, project: ProjectUIDL) -> str:
        """Return the shell document for ``project``."""
        project_globals = project.globals
        context = {
            "project_globals": project_globals,
            "project_name": project.name,
            "head_assets": [a for a in project_globals.assets if a.placement == "head"],
            "body_assets": [a for a in project_globals.assets if a.placement == "body"],
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def render_file(self, project: ProjectUIDL) -> GeneratedFile:
        """Return the shell document wrapped as a generated file."""
        return GeneratedFile(
            name=SHELL_FILE_NAME, file_type=_constants.HTML, content=self.render(project)
        )


__all__ = ["SHELL_FILE_NAME", "SHELL_TEMPLATE", "ShellRenderer"]
