"""CLI entry point for libtopo."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from libtopo.config import load_settings
from libtopo.graph import DependencyCycleError
from libtopo.pipeline import run_graph, run_sort
from libtopo.tree import TreeLoadError


@click.group()
@click.version_option(package_name="libtopo")
def cli() -> None:
    """Safe load order for a shared library and its runtime dependencies."""


@cli.command()
@click.option(
    "--shared-library-path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to the shared library to analyze.",
)
@click.option(
    "--dependency-tree",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON dependency tree extracted from the library.",
)
@click.option(
    "--output-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the sorted result (JSON).",
)
@click.option(
    "--dot-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the dependency graph in DOT format.",
)
def sort(
    shared_library_path: Path,
    dependency_tree: Path,
    output_file: Path | None,
    dot_file: Path | None,
) -> None:
    """Topologically sort a library's dependencies into a load order."""
    settings = load_settings(Path.cwd())
    output_file = output_file or settings.output_file
    dot_file = dot_file or settings.dot_file
    if output_file is None:
        raise click.UsageError(
            "No output file given. Pass --output-file or set output-file in "
            "libtopo.toml / [tool.libtopo]."
        )

    try:
        run_sort(
            shared_library_path,
            dependency_tree,
            output_file,
            dot_file=dot_file,
            indent=settings.indent,
        )
    except DependencyCycleError as exc:
        raise click.ClickException(
            f"{exc.node} is part of a dependency cycle: {' -> '.join(exc.cycle)}"
        ) from exc
    except TreeLoadError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"Failed to write output: {exc}") from exc


@cli.command()
@click.option(
    "--result",
    "result_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON result written by 'libtopo sort'.",
)
@click.option(
    "--dot-file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Where to write the DOT graph.",
)
def graph(result_path: Path, dot_file: Path) -> None:
    """Render a DOT graph from an existing result."""
    try:
        run_graph(result_path, dot_file)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid result file {result_path}: {exc}") from exc
    except KeyError as exc:
        raise click.ClickException(
            f"Invalid result file {result_path}: edge references unknown library {exc}"
        ) from exc
    except OSError as exc:
        raise click.ClickException(f"Failed to write {dot_file}: {exc}") from exc
