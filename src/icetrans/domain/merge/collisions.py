"""Ordinals for identifiers repeated within one processing scope."""

from __future__ import annotations


class IdentifierCollisionTracker:
    """Count occurrences of keys, handing out zero-based ordinals in first-seen order.

    Build one tracker per scope (a file on the archive scan, a whole pass on the
    CSV import) and drop it afterwards.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def next(self, key: str) -> int:
        ordinal = self._counts.get(key, 0)
        self._counts[key] = ordinal + 1
        return ordinal

    def __len__(self) -> int:
        return len(self._counts)
