"""Dependency graph utilities.

Builds the load-order graph for a shared library and sorts it topologically.
Edges point from a dependency to its dependent: when library A needs
library B, the graph holds B → A, so B is loaded before A.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

import networkx as nx

from .interner import NameInterner
from .models import Library


class DependencyCycleError(RuntimeError):
    """The dependency graph is not a DAG.

    Attributes:
        node: Name of one library on the cycle.
        cycle: Closed path of names around the cycle, first == last.
        node_id: Interned id of ``node``.
    """

    def __init__(self, node: str, cycle: list[str], node_id: int | None = None) -> None:
        self.node = node
        self.cycle = cycle
        self.node_id = node_id
        super().__init__(
            f"Dependency cycle detected at {node}: {' -> '.join(cycle)}"
        )


class _VisitState(Enum):
    GRAY = 1  # on the current DFS path
    BLACK = 2  # finished


def _add_library_node(graph: nx.DiGraph, interner: NameInterner, name: str) -> int:
    lib_id = interner.intern(name)
    graph.add_node(lib_id, name=name)
    return lib_id


def build_graph(
    main_name: str,
    main_needed: Sequence[str],
    libraries: Mapping[str, Library],
    interner: NameInterner,
) -> nx.DiGraph:
    """Build the load-before graph over interned library ids.

    The main library only becomes a node once something points at it, so an
    empty tree gives an empty graph. Names in a library's ``needed`` list that
    are not keys of ``libraries`` are dropped; names that only appear in
    ``main_needed`` still become nodes.

    Args:
        main_name: Name of the library under analysis.
        main_needed: Direct dependencies of the main library.
        libraries: Every transitively discovered library, keyed by name.
        interner: Fresh interner that will own the name ↔ id mapping.

    Returns:
        A DiGraph whose nodes are ids carrying a ``name`` attribute. The main
        library's id is stored as ``graph.graph["main"]``.
    """
    main_id = interner.intern(main_name)
    graph = nx.DiGraph(main=main_id)

    # Direct dependencies load before the main library
    for dep in main_needed:
        dep_id = _add_library_node(graph, interner, dep)
        graph.add_node(main_id, name=main_name)
        graph.add_edge(dep_id, main_id)

    for name, lib in libraries.items():
        lib_id = _add_library_node(graph, interner, name)
        for needed in lib.needed:
            # Unresolved references carry no path and no further deps
            if needed not in libraries:
                continue
            needed_id = _add_library_node(graph, interner, needed)
            graph.add_edge(needed_id, lib_id)

    return graph


def _node_name(graph: nx.DiGraph, node: Any) -> str:
    return graph.nodes[node].get("name", str(node))


def topo_sort(graph: nx.DiGraph) -> list[Any]:
    """Topologically sort the graph so every edge's source comes first.

    Uses a depth-first walk and returns the reverse post-order. The main
    library (``graph.graph["main"]``) is visited first so it comes after
    every library that does not need it, even one that never reaches it
    through the graph. Other roots
    and all successors are visited in ascending name order, so the same
    graph always sorts the same way.

    Args:
        graph: Load-before graph from build_graph().

    Returns:
        Node ids in load order (dependencies first).

    Raises:
        DependencyCycleError: If the graph contains a cycle, including a
            library that needs itself.

    Example:
        If A needs B, and B needs C, the graph is C → B → A and
        topo_sort() → [C, B, A]
    """

    def successors(node: Any) -> Any:
        return iter(sorted(graph.successors(node), key=lambda n: _node_name(graph, n)))

    state: dict[Any, _VisitState] = {}
    postorder: list[Any] = []

    roots = sorted(graph.nodes, key=lambda n: _node_name(graph, n))
    main = graph.graph.get("main")
    if main in graph:
        roots.remove(main)
        roots.insert(0, main)

    for root in roots:
        if root in state:
            continue
        state[root] = _VisitState.GRAY
        path = [root]
        pending = [successors(root)]

        while pending:
            succ = next(pending[-1], None)
            if succ is None:
                # All successors done: finish the node on top of the path
                pending.pop()
                node = path.pop()
                state[node] = _VisitState.BLACK
                postorder.append(node)
                continue

            succ_state = state.get(succ)
            if succ_state is _VisitState.GRAY:
                start = path.index(succ)
                cycle = [_node_name(graph, n) for n in path[start:]]
                cycle.append(_node_name(graph, succ))
                raise DependencyCycleError(_node_name(graph, succ), cycle, node_id=succ)
            if succ_state is None:
                state[succ] = _VisitState.GRAY
                path.append(succ)
                pending.append(successors(succ))

    postorder.reverse()
    return postorder
