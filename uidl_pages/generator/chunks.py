"""Chunk definitions and per-output-kind renderers used by the linker."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import json
import typing as typ

from bs4.element import PageElement

from uidl_pages import _constants
from uidl_pages.errors import LinkError

Position = typ.Literal["append", "prepend", "before", "after"]
ANCHORED_POSITIONS: frozenset[str] = frozenset({"before", "after"})
POSITIONS: frozenset[str] = frozenset({"append", "prepend", "before", "after"})

ChunkRenderer = typ.Callable[[object], str]


@dc.dataclass(slots=True, frozen=True)
class LinkDirective:
    """Where a chunk lands in the accumulated output.

    ``before``/``after`` splice next to the chunk named by ``anchor``;
    ``append``/``prepend`` add to the ends of the buffer and take no anchor.

    Examples
    --------
    >>> LinkDirective.after("html-template").position
    'after'
    """

    position: Position = "append"
    anchor: str | None = None

    @classmethod
    def before(cls, anchor: str) -> LinkDirective:
        """Return a directive placing a chunk in front of ``anchor``."""
        return cls(position="before", anchor=anchor)

    @classmethod
    def after(cls, anchor: str) -> LinkDirective:
        """Return a directive placing a chunk behind ``anchor``."""
        return cls(position="after", anchor=anchor)


@dc.dataclass(slots=True)
class ChunkDefinition:
    """A unit of generated content for one output kind.

    Attributes
    ----------
    name : str
        Identifier other chunks use as their anchor.
    file_type : str
        Output kind (``html``, ``css``, ``js``) the chunk belongs to.
    content : object
        Raw text or a structured fragment rendered at link time.
    directive : LinkDirective
        Placement relative to chunks linked earlier.
    """

    name: str
    file_type: str
    content: object
    directive: LinkDirective = dc.field(default_factory=LinkDirective)


def render_markup(content: object) -> str:
    """Serialize BeautifulSoup elements (or a sequence of them) to text."""
    if isinstance(content, PageElement):
        return str(content)
    if isinstance(content, cabc.Sequence) and not isinstance(content, str):
        return "".join(render_markup(item) for item in content)
    msg = f"Cannot render {type(content).__name__} as markup."
    raise LinkError(msg)


def render_style(content: object) -> str:
    """Serialize a ``selector -> declarations`` mapping into CSS rules.

    Examples
    --------
    >>> print(render_style({".title": {"color": "red"}}))
    .title {
      color: red;
    }
    """
    if not isinstance(content, cabc.Mapping):
        msg = f"Cannot render {type(content).__name__} as CSS."
        raise LinkError(msg)
    rules: list[str] = []
    for selector, declarations in content.items():
        body = "".join(
            f"  {prop}: {value};\n" for prop, value in declarations.items()
        )
        rules.append(f"{selector} {{\n{body}}}")
    return "\n".join(rules)


def render_data(content: object) -> str:
    """Serialize JSON-compatible data."""
    try:
        return json.dumps(content, indent=2)
    except TypeError as exc:
        msg = f"Cannot render {type(content).__name__} as JSON: {exc}"
        raise LinkError(msg) from exc


DEFAULT_RENDERERS: dict[str, ChunkRenderer] = {
    _constants.HTML: render_markup,
    _constants.CSS: render_style,
    _constants.JS: render_data,
    _constants.JSON: render_data,
}


__all__ = [
    "ANCHORED_POSITIONS",
    "DEFAULT_RENDERERS",
    "POSITIONS",
    "ChunkDefinition",
    "ChunkRenderer",
    "LinkDirective",
    "Position",
    "render_data",
    "render_markup",
    "render_style",
]
