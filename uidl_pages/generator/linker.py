"""Merge the ordered chunks of one output kind into a single text blob."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from uidl_pages.errors import LinkError

from .chunks import ANCHORED_POSITIONS, DEFAULT_RENDERERS, POSITIONS

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .chunks import ChunkDefinition, ChunkRenderer

logger = logging.getLogger(__name__)

SEPARATOR = "\n"


@dc.dataclass(slots=True)
class _Segment:
    name: str
    text: str
    after: str | None = None


class ChunkLinker:
    """Link chunk lists by honouring each chunk's directive.

    Chunks are processed in list order against one buffer of named segments.
    A chunk anchored ``before``/``after`` another lands next to that chunk's
    segment; chunks without an anchor are appended or prepended. Several
    chunks aimed at the same anchor keep their relative order.

    Example
    -------
    >>> from uidl_pages.generator.chunks import ChunkDefinition, LinkDirective
    >>> linker = ChunkLinker()
    >>> linker.link([
    ...     ChunkDefinition("body", "html", "<p>Hi</p>"),
    ...     ChunkDefinition("title", "html", "<h1>T</h1>", LinkDirective.before("body")),
    ... ])
    '<h1>T</h1>\\n<p>Hi</p>'
    """

    def __init__(
        self, renderers: cabc.Mapping[str, ChunkRenderer] | None = None
    ) -> None:
        self.renderers: dict[str, ChunkRenderer] = dict(DEFAULT_RENDERERS)
        if renderers:
            self.renderers.update(renderers)

    def link(self, chunks: cabc.Sequence[ChunkDefinition]) -> str:
        """Return the linked text for ``chunks``.

        Raises
        ------
        LinkError
            If a directive is malformed, names an anchor missing from the
            buffer, or a chunk's content cannot be rendered.
        """
        segments: list[_Segment] = []
        for chunk in chunks:
            self._check_directive(chunk)
            text = self._render(chunk)
            directive = chunk.directive
            if directive.anchor is None:
                segment = _Segment(chunk.name, text)
                if directive.position == "prepend":
                    segments.insert(0, segment)
                else:
                    segments.append(segment)
                continue

            index = _find_anchor(segments, directive.anchor)
            if index is None:
                msg = (
                    f"Chunk '{chunk.name}' is linked {directive.position} "
                    f"'{directive.anchor}', which is not in the {chunk.file_type} output."
                )
                raise LinkError(msg)
            if directive.position == "before":
                segments.insert(
                    index, _Segment(chunk.name, text, after=segments[index].after)
                )
            else:
                index += 1
                while index < len(segments) and segments[index].after == directive.anchor:
                    index += 1
                segments.insert(index, _Segment(chunk.name, text, after=directive.anchor))
        logger.debug("linked %d chunks", len(segments))
        return SEPARATOR.join(segment.text for segment in segments)

    def _render(self, chunk: ChunkDefinition) -> str:
        """Render structured content right before it is spliced."""
        if isinstance(chunk.content, str):
            return chunk.content
        renderer = self.renderers.get(chunk.file_type)
        if renderer is None:
            msg = (
                f"Chunk '{chunk.name}' holds {type(chunk.content).__name__} content "
                f"but no renderer is registered for '{chunk.file_type}'."
            )
            raise LinkError(msg)
        return renderer(chunk.content)

    @staticmethod
    def _check_directive(chunk: ChunkDefinition) -> None:
        directive = chunk.directive
        if directive.position not in POSITIONS:
            msg = f"Chunk '{chunk.name}' has unknown position '{directive.position}'."
            raise LinkError(msg)
        anchored = directive.position in ANCHORED_POSITIONS
        if anchored and directive.anchor is None:
            msg = f"Chunk '{chunk.name}' is linked {directive.position} without an anchor."
            raise LinkError(msg)
        if not anchored and directive.anchor is not None:
            msg = (
                f"Chunk '{chunk.name}' cannot {directive.position} and name "
                f"anchor '{directive.anchor}'."
            )
            raise LinkError(msg)


def _find_anchor(segments: list[_Segment], anchor: str) -> int | None:
    for index, segment in enumerate(segments):
        if segment.name == anchor:
            return index
    return None


__all__ = ["SEPARATOR", "ChunkLinker"]
