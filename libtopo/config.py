"""Configuration loading.

Settings come from ``libtopo.toml`` (top-level keys) or, failing that, from
``[tool.libtopo]`` in ``pyproject.toml``. Command-line options override both.

Example::

    [tool.libtopo]
    output-file = "build/load-order.json"
    dot-file = "build/load-order.dot"
    indent = 4
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tomlkit.exceptions import TOMLKitError

from .shell import fatal

CONFIG_FILE = "libtopo.toml"


class Settings(BaseModel):
    """Resolved settings for one run.

    Attributes:
        output_file: Where the JSON result goes.
        dot_file: Optional DOT export target.
        indent: JSON indentation width.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    output_file: Path | None = Field(default=None, alias="output-file")
    dot_file: Path | None = Field(default=None, alias="dot-file")
    indent: int = Field(default=2, ge=0)


def load_toml(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a TOML file."""
    return tomlkit.parse(path.read_text())


def get_tool_table(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Extract ``[tool.libtopo]`` from a pyproject.toml, or {} if absent."""
    return dict(doc.get("tool", {}).get("libtopo", {}))


def load_settings(root: Path) -> Settings:
    """Find and parse the configuration under ``root``.

    Missing files give default settings. Invalid values are fatal.
    """
    config = root / CONFIG_FILE
    pyproject = root / "pyproject.toml"

    raw: dict[str, Any] = {}
    path = config if config.exists() else pyproject
    if path.exists():
        try:
            doc = load_toml(path)
        except TOMLKitError as exc:
            fatal(f"Invalid libtopo configuration in {path}: {exc}")
        raw = dict(doc) if path == config else get_tool_table(doc)

    try:
        return Settings.model_validate({k: _unwrap(v) for k, v in raw.items()})
    except ValidationError as exc:
        fatal(f"Invalid libtopo configuration: {exc}")


def _unwrap(value: Any) -> Any:
    # tomlkit items -> plain Python values
    return value.unwrap() if hasattr(value, "unwrap") else value
