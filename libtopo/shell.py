"""Console output helpers.

Progress goes to stdout, warnings and errors to stderr.
"""

from __future__ import annotations

import sys


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of an analysis in terminal output.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    """Print an indented detail line under the current step."""
    print(f"  {msg}")


def warn(msg: str) -> None:
    """Print a warning to stderr without stopping."""
    print(f"WARNING: {msg}", file=sys.stderr)


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the analysis.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
