"""Assembles the name-keyed load plan from the interned graph.

Everything the caller sees is sorted so that repeated runs on the same tree
produce byte-identical JSON.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import networkx as nx

from .graph import build_graph, topo_sort
from .interner import NameInterner
from .models import DependencyTree, Edge, Lib, Library, TopoSortResult


def _resolve(interner: NameInterner, ident: int) -> str:
    name = interner.resolve(ident)
    if name is None:
        raise KeyError(f"Graph node {ident} was never interned")
    return name


def assemble_result(
    graph: nx.DiGraph,
    interner: NameInterner,
    order: Sequence[int],
    main_name: str,
    main_path: str,
    libraries: Mapping[str, Library],
) -> TopoSortResult:
    """Convert the sorted id graph back into names.

    Args:
        graph: Load-before graph over interned ids.
        interner: The interner that produced the graph's ids.
        order: Node ids in load order, from topo_sort().
        main_name: Name of the library under analysis.
        main_path: Path of the library under analysis.
        libraries: Discovered libraries, used to look up resolved paths.
    """
    vertices = sorted(_resolve(interner, node) for node in graph.nodes)

    edge_pairs = {
        (_resolve(interner, src), _resolve(interner, dst)) for src, dst in graph.edges
    }
    edges = [Edge(src=src, dst=dst) for src, dst in sorted(edge_pairs)]

    library_map = {
        name: Lib(name=name, path=libraries[name].path) for name in sorted(libraries)
    }

    topo_sorted_libs: list[Lib] = []
    for ident in order:
        name = _resolve(interner, ident)
        if name == main_name:
            path: str | None = main_path
        else:
            # Names only listed by the main library may have no entry
            lib = libraries.get(name)
            path = lib.path if lib is not None else None
        topo_sorted_libs.append(Lib(name=name, path=path))

    return TopoSortResult(
        vertices=vertices,
        edges=edges,
        library_map=library_map,
        topo_sorted_libs=topo_sorted_libs,
    )


def get_topologically_sorted_result(
    main_name: str, main_path: str, tree: DependencyTree
) -> TopoSortResult:
    """Run the whole analysis for one dependency tree.

    Raises:
        DependencyCycleError: If the libraries cannot be ordered. Nothing is
            assembled in that case.
    """
    interner = NameInterner()
    graph = build_graph(main_name, tree.needed, tree.libraries, interner)
    order = topo_sort(graph)
    return assemble_result(graph, interner, order, main_name, main_path, tree.libraries)
