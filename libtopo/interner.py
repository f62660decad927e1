"""Library name interning.

Graph nodes are dense integer ids rather than strings. The interner hands out
those ids and maps them back to names when the result is assembled.
"""

from __future__ import annotations

# Ids are unsigned 32-bit; the top value is never handed out.
MAX_IDS = 2**32 - 1


class InternerExhaustedError(RuntimeError):
    """Raised when more distinct names are seen than the id space holds."""


class NameInterner:
    """Append-only bijection between library names and ids ``0..len-1``.

    Ids are assigned sequentially in first-seen order and never reused.
    A fresh interner is created for every analysis run.
    """

    def __init__(self, max_ids: int = MAX_IDS) -> None:
        self._max_ids = max_ids
        self._ids: dict[str, int] = {}
        self._names: list[str] = []

    def intern(self, name: str) -> int:
        """Return the id for ``name``, allocating the next one if unseen."""
        existing = self._ids.get(name)
        if existing is not None:
            return existing

        next_id = len(self._names)
        if next_id >= self._max_ids:
            raise InternerExhaustedError(
                f"Cannot intern {name!r}: all {self._max_ids} ids are in use"
            )
        self._ids[name] = next_id
        self._names.append(name)
        return next_id

    def resolve(self, ident: int) -> str | None:
        """Return the name bound to ``ident``, or None if it was never allocated."""
        if 0 <= ident < len(self._names):
            return self._names[ident]
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._names)
