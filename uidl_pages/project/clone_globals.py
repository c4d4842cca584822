"""Fold compiled pages into the project's shared shell document.

The shell (the ``entry`` folder of the file map) owns everything that must
appear once per project: one ``<head>``, the global scripts, the stylesheet
link. Each root-level page keeps its own ``<title>`` and ``<meta>`` tags,
which win over the shell's defaults without replacing them, and its own
``<link>`` tags:

1. Head scripts, body scripts, head meta tags, and the head title are lifted
   out of the shell.
2. A stylesheet link is added when the project declares style sets.
3. For every root HTML page: page meta tags go first in the head, followed by
   the shell's meta tags; the page title (or the shell title when the page
   has none) goes in front of them. The page's own link tags follow the
   stylesheet link, then the shell's head scripts are put back in their
   original order. The rest of the page becomes the body, followed by the
   shell's body scripts. The document is formatted and replaces the page
   file.
4. The ``entry`` folder is removed from the file map.

Each page starts from a fresh parse of the stripped shell, so no page can
observe changes made for another.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from uidl_pages import _constants
from uidl_pages.generator import GeneratedFile

from .dom import SoupDocumentParser
from .formatter import prettify_html

if typ.TYPE_CHECKING:
    from .dom import DocumentParser
    from .formatter import Formatter
    from .models import ProjectPluginStructure

logger = logging.getLogger(__name__)

STYLESHEET_LINK = f'<link rel="stylesheet" href="{_constants.STYLE_SHEET_HREF}">'


@dc.dataclass(slots=True, frozen=True)
class _ShellParts:
    """Shell markup lifted out before pages are merged."""

    document: str
    head_scripts: str
    body_scripts: str
    meta: str
    title: str


class ProjectPluginCloneGlobals:
    """Project plugin merging root pages into the shared shell document."""

    name = "clone-globals"

    def __init__(
        self,
        *,
        parser: DocumentParser | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        """Initialize the plugin.

        Parameters
        ----------
        parser : DocumentParser, optional
            Document implementation; defaults to BeautifulSoup.
        formatter : Formatter, optional
            Pretty-printer invoked once per merged page; defaults to
            :func:`~uidl_pages.project.formatter.prettify_html`.
        """
        self.parser = parser or SoupDocumentParser()
        self.formatter = formatter or prettify_html

    async def run_before(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
        """Leave the structure untouched; merging happens after compilation."""
        return structure

    async def run_after(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
        """Merge every root HTML page into the shell and drop the shell entry."""
        files = structure.files
        entry = files.get(_constants.ENTRY_FILE_ID)
        if entry is None or not entry.files:
            return structure

        shell = self._strip_shell(
            entry.files[0].content, bool(structure.uidl.style_set_definitions)
        )
        for page_id, folder in files.items():
            if page_id == _constants.ENTRY_FILE_ID or not folder.is_root:
                continue
            folder.files = [
                self._merge_page(shell, generated)
                if generated.file_type == _constants.HTML
                else generated
                for generated in folder.files
            ]
            logger.debug("merged page %s into the shell", page_id)

        del files[_constants.ENTRY_FILE_ID]
        return structure

    def _strip_shell(self, content: str, link_stylesheet: bool) -> _ShellParts:
        shell = self.parser.parse_document(content)
        head_scripts = shell.select("script", "head")
        body_scripts = shell.select("script", "body")
        meta = shell.select("meta", "head")
        title = shell.select("title", "head")

        shell.remove("script", "head")
        shell.remove("script", "body")
        shell.remove("meta", "head")
        shell.remove("title", "head")

        if link_stylesheet:
            shell.append("head", STYLESHEET_LINK)
        return _ShellParts(
            document=shell.html(),
            head_scripts=head_scripts,
            body_scripts=body_scripts,
            meta=meta,
            title=title,
        )

    def _merge_page(self, shell: _ShellParts, page_file: GeneratedFile) -> GeneratedFile:
        document = self.parser.parse_document(shell.document)
        document.empty("body")
        document.remove("title", "head")
        document.remove("meta", "head")

        page = self.parser.parse_fragment(page_file.content)

        page_meta = page.select("meta")
        document.prepend("head", page_meta + shell.meta)
        page.remove("meta")

        page_title = page.select("title")
        document.prepend("head", page_title or shell.title)
        page.remove("title")

        document.append("head", page.select("link"))
        page.remove("link")
        document.append("head", shell.head_scripts)

        document.append("body", page.inner_html())
        document.append("body", shell.body_scripts)

        formatted = self.formatter({_constants.HTML: document.html()})
        return GeneratedFile(
            name=page_file.name,
            file_type=_constants.HTML,
            content=formatted[_constants.HTML],
        )


__all__ = ["STYLESHEET_LINK", "ProjectPluginCloneGlobals"]
