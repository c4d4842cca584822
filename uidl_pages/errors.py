"""Exception hierarchy raised by the UIDL compilation pipeline.

Every stage raises its own subclass of :class:`UIDLError` so callers can tell
bad input (``ValidationError``, ``ResolutionError``, ``LinkError``) apart from
setup mistakes (``ConfigurationError``) and from failures inside user supplied
plugins (``PluginError``). Nothing is retried; the first error aborts the
compilation call.
"""

from __future__ import annotations


class UIDLError(Exception):
    """Base class for every error raised by uidl_pages."""


class ValidationError(UIDLError):
    """Raised when a UIDL document fails schema or content validation."""


class ResolutionError(UIDLError):
    """Raised when a node type cannot be mapped to a concrete tag."""

    def __init__(self, element_type: str, path: str) -> None:
        self.element_type = element_type
        self.path = path
        msg = f"Unknown UIDL element type '{element_type}' at {path}."
        super().__init__(msg)


class PluginError(UIDLError):
    """Raised when a plugin fails while the assembly line is running."""

    def __init__(self, plugin_name: str, reason: str) -> None:
        self.plugin_name = plugin_name
        msg = f"Plugin '{plugin_name}' failed: {reason}"
        super().__init__(msg)


class LinkError(UIDLError):
    """Raised when a chunk cannot be linked into its output buffer."""


class ConfigurationError(UIDLError):
    """Raised when the generator is missing a prerequisite or is misconfigured."""


__all__ = [
    "ConfigurationError",
    "LinkError",
    "PluginError",
    "ResolutionError",
    "UIDLError",
    "ValidationError",
]
