"""Tests for libtopo.models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from libtopo.models import DependencyTree, Edge, Lib, Library, TopoSortResult


class TestLibrary:
    def test_create_with_required_fields(self) -> None:
        lib = Library(name="libc.so.6")
        assert lib.name == "libc.so.6"
        assert lib.needed == []
        assert lib.path is None

    def test_accepts_resolved_path_key(self) -> None:
        lib = Library.model_validate({"name": "x", "resolved_path": "/lib/x"})
        assert lib.path == "/lib/x"

    def test_accepts_realpath_key(self) -> None:
        lib = Library.model_validate({"name": "x", "realpath": "/lib/x"})
        assert lib.path == "/lib/x"

    def test_path_key_wins(self) -> None:
        lib = Library.model_validate(
            {"name": "x", "path": "/lib/x", "realpath": "/lib/x.1.2"}
        )
        assert lib.path == "/lib/x"


class TestDependencyTree:
    def test_defaults_are_empty(self) -> None:
        tree = DependencyTree()
        assert tree.needed == []
        assert tree.libraries == {}

    def test_accepts_main_needed_key(self) -> None:
        tree = DependencyTree.model_validate({"main_needed": ["a"], "libraries": {}})
        assert tree.needed == ["a"]

    def test_accepts_lddtree_keys(self) -> None:
        tree = DependencyTree.model_validate(
            {"needed": ["a"], "libs": {"a": {"needed": [], "realpath": "/lib/a"}}}
        )
        assert tree.needed == ["a"]
        assert tree.libraries["a"].path == "/lib/a"

    def test_library_name_defaults_to_key(self) -> None:
        tree = DependencyTree.model_validate({"libraries": {"libz.so.1": {}}})
        assert tree.libraries["libz.so.1"].name == "libz.so.1"

    def test_rejects_wrong_types(self) -> None:
        with pytest.raises(ValidationError):
            DependencyTree.model_validate({"main_needed": "libc.so.6"})


class TestTopoSortResult:
    def test_serializes_exact_field_names(self) -> None:
        result = TopoSortResult(
            vertices=["A", "B"],
            edges=[Edge(src="B", dst="A")],
            library_map={},
            topo_sorted_libs=[Lib(name="B"), Lib(name="A", path="/opt/A")],
        )
        data = json.loads(result.model_dump_json())
        assert list(data) == ["vertices", "edges", "library_map", "topo_sorted_libs"]
        assert data["edges"] == [{"src": "B", "dst": "A"}]
        assert data["topo_sorted_libs"] == [
            {"name": "B", "path": None},
            {"name": "A", "path": "/opt/A"},
        ]

    def test_output_models_are_frozen(self) -> None:
        edge = Edge(src="a", dst="b")
        with pytest.raises(ValidationError):
            edge.src = "c"
