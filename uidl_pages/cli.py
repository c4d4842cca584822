"""Cyclopts CLI entrypoint for compiling UIDL components and projects.

The ``uidl`` console script reads a JSON document, compiles it with the
bundled HTML generator (plus any mapping tables listed in ``uidl.yaml``), and
writes the generated files to the output directory.

Examples
--------
Compile a single component:

>>> from uidl_pages.cli import app
>>> app(["component", "home-page.json"])  # doctest: +SKIP

Compile a project into a custom directory:

>>> app(["project", "site.json", "--output-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import GeneratorConfig, load_generator_config
from .mapping import load_mapping_table
from .plugins import create_html_generator
from .project import (
    ProjectFolder,
    ProjectGenerator,
    ProjectPluginCloneGlobals,
    write_project,
)

DEFAULT_CONFIG = Path("uidl.yaml")

app = App(name="uidl", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path) -> GeneratorConfig:
    """Return the config at ``config``, or defaults when the default file is absent."""
    if config == DEFAULT_CONFIG and not config.exists():
        return GeneratorConfig()
    return load_generator_config(config)


def _unformatted(files: dict[str, str]) -> dict[str, str]:
    return files


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Compile a UIDL component document into HTML and CSS files.")
def component(
    source: typ.Annotated[Path, Parameter(help="Path to the component JSON document")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to generator config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Compile one component document.

    Parameters
    ----------
    source : Path
        JSON file holding the component UIDL.
    config : Path, optional
        Path to ``uidl.yaml``; ignored when the default file does not exist.
    output_dir : Path or None, optional
        Override for the configured output directory.
    verbose : bool, optional
        Enable debug logging for every pipeline stage.
    """
    _configure_logging(verbose)
    generator_config = _load_config(config)
    generator = create_html_generator(
        mappings=[load_mapping_table(path) for path in generator_config.mapping_paths]
    )
    compiled = asyncio.run(
        generator.generate_component(source.read_bytes(), generator_config.options())
    )
    target = output_dir or generator_config.output_dir
    folder = ProjectFolder(path=[""], files=compiled.files)
    written = write_project({"component": folder}, target)
    for path in written:
        print(f"wrote {_format_path(path)}")
    for name, dependency in sorted(compiled.dependencies.items()):
        print(f"depends on {name} {dependency.version}".rstrip())


@app.command(help="Compile a UIDL project document into merged HTML pages.")
def project(
    source: typ.Annotated[Path, Parameter(help="Path to the project JSON document")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to generator config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Compile a project document and write every merged page.

    Parameters
    ----------
    source : Path
        JSON file holding the project UIDL.
    config : Path, optional
        Path to ``uidl.yaml``; ignored when the default file does not exist.
    output_dir : Path or None, optional
        Override for the configured output directory.
    verbose : bool, optional
        Enable debug logging for every pipeline stage.
    """
    _configure_logging(verbose)
    generator_config = _load_config(config)
    component_generator = create_html_generator(
        mappings=[load_mapping_table(path) for path in generator_config.mapping_paths],
        link_stylesheet=True,
    )
    generator = ProjectGenerator(component_generator)
    if not generator_config.pretty:
        generator.plugins = [ProjectPluginCloneGlobals(formatter=_unformatted)]
    result = asyncio.run(
        generator.generate_project(source.read_bytes(), generator_config.options())
    )
    for path in write_project(result.files, output_dir or generator_config.output_dir):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``uidl`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
