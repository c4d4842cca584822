"""Load generator configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from uidl_pages.errors import ConfigurationError

from .models import GeneratorConfig


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load the YAML file describing command-line generator settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (for example ``uidl.yaml``).

    Returns
    -------
    GeneratorConfig
        Parsed configuration. Mapping table paths and the output directory are
        resolved relative to the directory holding ``path``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    ConfigurationError
        If the file is not a mapping or a field has the wrong type.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_generator_config(Path("uidl.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('dist')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigurationError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent
    defaults = GeneratorConfig()

    mappings_raw = raw.get("mappings") or []
    if not isinstance(mappings_raw, list):
        msg = "'mappings' must be a list of mapping table paths."
        raise ConfigurationError(msg)

    return GeneratorConfig(
        mapping_paths=[base_dir / str(entry) for entry in mappings_raw],
        output_dir=base_dir / str(raw.get("output_dir", defaults.output_dir)),
        skip_validation=_flag(raw, "skip_validation", default=defaults.skip_validation),
        pretty=_flag(raw, "pretty", default=defaults.pretty),
    )


def _flag(raw: typ.Mapping[str, typ.Any], key: str, *, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        msg = f"'{key}' must be a boolean, got {value!r}."
        raise ConfigurationError(msg)
    return value


__all__ = ["load_generator_config"]
