"""Load-order pipeline: load tree → build graph → sort → write.

This module drives one libtopo analysis:
1. Load the pre-extracted dependency tree of the shared library
2. Build the load-before graph and sort it topologically
3. Write the JSON result, and the DOT diagram if requested

Nothing is written until the whole result exists, so a dependency cycle
leaves no output files behind.
"""

from __future__ import annotations

from pathlib import Path

from .export import load_result, render_dot, write_dot, write_result
from .models import DependencyTree, TopoSortResult
from .result import get_topologically_sorted_result
from .shell import info, step, warn
from .tree import load_dependency_tree


def report_unresolved(tree: DependencyTree) -> list[str]:
    """Warn about direct dependencies the extractor never resolved.

    They stay in the load order, just without a path.
    """
    missing = [name for name in tree.needed if name not in tree.libraries]
    for name in missing:
        warn(f"{name} is needed but was not resolved; it will have no path")
    return missing


def run_sort(
    shared_library_path: Path,
    tree_path: Path,
    output_file: Path,
    dot_file: Path | None = None,
    indent: int = 2,
) -> TopoSortResult:
    """Compute and write the load order of one shared library.

    Args:
        shared_library_path: The library under analysis. Its file name is the
            main library name; the path is reported as given.
        tree_path: JSON dependency tree produced by the extractor.
        output_file: Destination of the JSON result.
        dot_file: Optional destination of the DOT diagram.
        indent: JSON indentation width.

    Raises:
        DependencyCycleError: If the dependencies form a cycle.
    """
    main_name = shared_library_path.name
    main_path = str(shared_library_path)

    step(f"Loading dependency tree for {main_name}")
    tree = load_dependency_tree(tree_path)
    info(f"{main_name} has {len(tree.libraries)} dependencies")
    report_unresolved(tree)

    step("Sorting libraries")
    result = get_topologically_sorted_result(main_name, main_path, tree)
    for lib in result.topo_sorted_libs:
        info(f"{lib.name} ({lib.path or '<unresolved>'})")

    step("Writing results")
    # DOT is rendered before any file is written
    dot_text = render_dot(result) if dot_file is not None else None
    write_result(result, output_file, indent=indent)
    info(f"Wrote {output_file}")
    if dot_file is not None:
        write_dot(dot_text, dot_file)
        info(f"Wrote {dot_file}")

    return result


def run_graph(result_path: Path, dot_file: Path) -> TopoSortResult:
    """Render the DOT diagram of an existing JSON result."""
    step(f"Rendering {result_path}")
    result = load_result(result_path)
    write_dot(result, dot_file)
    info(f"Wrote {dot_file} ({len(result.vertices)} nodes, {len(result.edges)} edges)")
    return result
