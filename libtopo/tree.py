"""Loading the pre-extracted dependency tree.

The tree is produced by an external extractor (lddtree or similar) and saved
as JSON, either in our own shape::

    {"main_needed": [...], "libraries": {name: {"needed": [...], "resolved_path": ...}}}

or in lddtree's shape, with ``needed``/``libs`` and per-library ``realpath``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .models import DependencyTree


class TreeLoadError(ValueError):
    """The dependency tree file is missing, unreadable or malformed."""


def parse_dependency_tree(text: str, source: str = "<string>") -> DependencyTree:
    """Validate a JSON document into a DependencyTree."""
    try:
        return DependencyTree.model_validate_json(text)
    except ValidationError as exc:
        raise TreeLoadError(f"Invalid dependency tree in {source}: {exc}") from exc


def load_dependency_tree(path: Path) -> DependencyTree:
    """Read and validate the dependency tree stored at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TreeLoadError(f"Cannot read dependency tree {path}: {exc}") from exc
    return parse_dependency_tree(text, source=str(path))
