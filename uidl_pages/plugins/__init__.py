"""Bundled component plugins producing HTML and CSS chunks."""

from .head import HTML_HEAD_CHUNK, HtmlHeadPlugin
from .markup import HTML_TEMPLATE_CHUNK, HtmlMarkupPlugin, inline_style
from .presets import create_html_generator
from .styles import (
    COMPONENT_STYLES_CHUNK,
    STYLE_SETS_CHUNK,
    CssStylePlugin,
    style_sheet_rules,
)

__all__ = [
    "COMPONENT_STYLES_CHUNK",
    "HTML_HEAD_CHUNK",
    "HTML_TEMPLATE_CHUNK",
    "STYLE_SETS_CHUNK",
    "CssStylePlugin",
    "HtmlHeadPlugin",
    "HtmlMarkupPlugin",
    "create_html_generator",
    "inline_style",
    "style_sheet_rules",
]
