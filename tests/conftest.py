"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from libtopo.models import DependencyTree, Library


@pytest.fixture
def diamond_tree() -> DependencyTree:
    """A needs B, C, F; B and C need D; D needs E; E needs F."""
    return DependencyTree(
        needed=["B", "C", "F"],
        libraries={
            "B": Library(name="B", needed=["D"], path="/lib/B"),
            "C": Library(name="C", needed=["D"], path="/lib/C"),
            "D": Library(name="D", needed=["E"], path="/lib/D"),
            "E": Library(name="E", needed=["F"], path="/lib/E"),
            "F": Library(name="F", path="/lib/F"),
        },
    )


@pytest.fixture
def cyclic_tree() -> DependencyTree:
    """main needs A; A needs B; B needs A."""
    return DependencyTree(
        needed=["A"],
        libraries={
            "A": Library(name="A", needed=["B"], path="/lib/A"),
            "B": Library(name="B", needed=["A"], path="/lib/B"),
        },
    )


@pytest.fixture
def shared_library(tmp_path: Path) -> Path:
    """An (empty) shared library file to analyze."""
    lib = tmp_path / "libmain.so"
    lib.write_bytes(b"\x7fELF")
    return lib


@pytest.fixture
def tree_file(tmp_path: Path) -> Path:
    """A small dependency tree on disk, in the native JSON shape."""
    content = {
        "main_needed": ["libfoo.so.1", "libc.so.6", "libmissing.so"],
        "libraries": {
            "libfoo.so.1": {
                "needed": ["libc.so.6", "libgone.so"],
                "resolved_path": "/usr/lib/libfoo.so.1",
            },
            "libc.so.6": {"needed": [], "resolved_path": "/usr/lib/libc.so.6"},
        },
    }
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(content))
    return path


@pytest.fixture
def cyclic_tree_file(tmp_path: Path) -> Path:
    content = {
        "main_needed": ["liba.so"],
        "libraries": {
            "liba.so": {"needed": ["libb.so"], "resolved_path": "/lib/liba.so"},
            "libb.so": {"needed": ["liba.so"], "resolved_path": "/lib/libb.so"},
        },
    }
    path = tmp_path / "cyclic.json"
    path.write_text(json.dumps(content))
    return path
