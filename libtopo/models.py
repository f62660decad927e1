"""Data models for libtopo.

These Pydantic models describe the dependency tree handed to us by an
external extractor (input) and the load plan we write back out (output).
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class Library(BaseModel):
    """A shared library discovered while walking the dependency tree.

    Attributes:
        name: Library name as it appears in DT_NEEDED entries (e.g. "libc.so.6").
        needed: Direct dependency names, in the order the library lists them.
                Names missing from the tree's library map are ignored when
                building the graph.
        path: Resolved path on disk, if the extractor found one.
    """

    name: str = ""
    needed: list[str] = Field(default_factory=list)
    path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("path", "resolved_path", "realpath"),
    )


class DependencyTree(BaseModel):
    """Pre-extracted dependency tree of the library under analysis.

    The main library itself is not part of ``libraries``; its name and path
    are supplied separately by the caller.
    """

    needed: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("main_needed", "needed"),
    )
    libraries: dict[str, Library] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("libraries", "libs"),
    )

    @model_validator(mode="after")
    def _fill_library_names(self) -> DependencyTree:
        # Entries keyed by name may omit the name field itself
        for key, lib in self.libraries.items():
            if not lib.name:
                lib.name = key
        return self


class Edge(BaseModel):
    """A load-before relation: ``src`` must be loaded before ``dst``."""

    model_config = ConfigDict(frozen=True)

    src: str
    dst: str


class Lib(BaseModel):
    """A library entry in the output, with its resolved path if known."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str | None = None


class TopoSortResult(BaseModel):
    """Serializable result of a load-order analysis.

    Attributes:
        vertices: Every library name in the graph, sorted.
        edges: Load-before pairs, sorted by (src, dst) with duplicates removed.
        library_map: Every discovered library except the main one.
        topo_sorted_libs: Safe load order, dependencies first, main library last.
    """

    vertices: list[str] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    library_map: dict[str, Lib] = Field(default_factory=dict)
    topo_sorted_libs: list[Lib] = Field(default_factory=list)
