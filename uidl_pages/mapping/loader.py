"""Load mapping tables from YAML files or in-memory mappings."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from uidl_pages.errors import ConfigurationError
from uidl_pages.uidl import ComponentDependency

from .models import STYLE_STRATEGIES, MappingEntry, MappingTable

BASE_MAPPING_PATH = Path(__file__).parent / "html.yaml"


def load_mapping_table(path: Path) -> MappingTable:
    """Load a mapping table from a YAML file.

    Parameters
    ----------
    path : Path
        File with top-level ``elements``, ``events``, and ``attributes`` keys.

    Returns
    -------
    MappingTable
        The parsed table, named after the file stem.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ConfigurationError
        If the file does not describe a valid mapping table.
    """
    if not path.exists():
        msg = f"Mapping table '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Mapping table '{path}' must be a mapping at the top level."
        raise ConfigurationError(msg)
    return build_mapping_table(loaded, name=path.stem)


def load_base_mapping() -> MappingTable:
    """Return the bundled HTML mapping table."""
    return load_mapping_table(BASE_MAPPING_PATH)


def build_mapping_table(
    payload: typ.Mapping[str, typ.Any], *, name: str = "custom"
) -> MappingTable:
    """Build a MappingTable from a mapping payload.

    Examples
    --------
    >>> table = build_mapping_table({"elements": {"card": {"tag": "article"}}})
    >>> table.elements["card"].tag
    'article'
    """
    elements_raw = payload.get("elements") or {}
    if not isinstance(elements_raw, dict):
        msg = f"Mapping table '{name}': 'elements' must be a mapping."
        raise ConfigurationError(msg)
    elements = {
        str(key): _build_entry(name, str(key), value)
        for key, value in elements_raw.items()
    }
    return MappingTable(
        name=name,
        elements=elements,
        events=_string_map(name, "events", payload.get("events")),
        attributes=_string_map(name, "attributes", payload.get("attributes")),
    )


def _build_entry(table: str, key: str, payload: object) -> MappingEntry:
    """Build a MappingEntry, accepting a bare tag string as shorthand."""
    match payload:
        case str() as tag:
            return MappingEntry(tag=tag)
        case dict():
            tag = payload.get("tag")
            if not tag or not isinstance(tag, str):
                msg = f"Mapping table '{table}': element '{key}' is missing 'tag'."
                raise ConfigurationError(msg)
            strategy = payload.get("style_strategy", "class")
            if strategy not in STYLE_STRATEGIES:
                msg = (
                    f"Mapping table '{table}': element '{key}' has unknown "
                    f"style_strategy '{strategy}'."
                )
                raise ConfigurationError(msg)
            return MappingEntry(
                tag=tag,
                attrs=dict(payload.get("attrs") or {}),
                style=dict(payload.get("style") or {}),
                style_strategy=strategy,
                dependency=_build_dependency(table, key, payload.get("dependency")),
            )
        case _:
            msg = f"Mapping table '{table}': element '{key}' must be a tag or mapping."
            raise ConfigurationError(msg)


def _build_dependency(
    table: str, key: str, payload: object
) -> ComponentDependency | None:
    match payload:
        case None:
            return None
        case str() as dependency_name:
            return ComponentDependency(name=dependency_name)
        case dict():
            name = payload.get("name")
            if not name or not isinstance(name, str):
                msg = (
                    f"Mapping table '{table}': element '{key}' dependency "
                    "is missing 'name'."
                )
                raise ConfigurationError(msg)
            return ComponentDependency(
                name=name,
                version=str(payload.get("version", "")),
                type=str(payload.get("type", "package")),
            )
        case _:
            msg = (
                f"Mapping table '{table}': element '{key}' has an unsupported "
                f"dependency declaration: {payload!r}"
            )
            raise ConfigurationError(msg)


def _string_map(table: str, field: str, payload: object) -> dict[str, str]:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        msg = f"Mapping table '{table}': '{field}' must be a mapping."
        raise ConfigurationError(msg)
    return {str(key): str(value) for key, value in payload.items()}


__all__ = [
    "BASE_MAPPING_PATH",
    "build_mapping_table",
    "load_base_mapping",
    "load_mapping_table",
]
