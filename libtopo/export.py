"""Writing results to disk: the JSON load plan and a DOT diagram."""

from __future__ import annotations

from pathlib import Path

import pydot

from .models import TopoSortResult


def to_dot(result: TopoSortResult) -> pydot.Dot:
    """Build a directed DOT graph of the result.

    Nodes get a fresh local index and are labeled with the library name;
    edges carry no label.
    """
    dot = pydot.Dot("libraries", graph_type="digraph")
    index: dict[str, str] = {}
    for i, name in enumerate(result.vertices):
        index[name] = str(i)
        dot.add_node(pydot.Node(index[name], label=name))
    for edge in result.edges:
        dot.add_edge(pydot.Edge(index[edge.src], index[edge.dst]))
    return dot


def render_dot(result: TopoSortResult) -> str:
    """Return the DOT text of the result."""
    return to_dot(result).to_string()


def write_dot(result: TopoSortResult | str, path: Path) -> None:
    """Write DOT into ``path``, replacing any existing file.

    Accepts either a result to render or text from render_dot().
    """
    text = result if isinstance(result, str) else render_dot(result)
    path.write_text(text, encoding="utf-8")


def write_result(result: TopoSortResult, path: Path, indent: int = 2) -> None:
    """Write the result as pretty-printed JSON."""
    path.write_text(result.model_dump_json(indent=indent) + "\n", encoding="utf-8")


def load_result(path: Path) -> TopoSortResult:
    """Read back a result previously written by write_result()."""
    return TopoSortResult.model_validate_json(path.read_text(encoding="utf-8"))
