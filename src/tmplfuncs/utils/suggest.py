"""
"Did you mean?" hints for unknown function names.
"""

from __future__ import annotations

from collections.abc import Iterable


def edit_distance(a: str, b: str) -> int:
    """Number of single-character inserts, deletes or substitutions from a to b."""
    if len(a) < len(b):
        a, b = b, a
    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        diagonal, row[0] = row[0], i
        for j, cb in enumerate(b, 1):
            diagonal, row[j] = row[j], min(row[j] + 1, row[j - 1] + 1, diagonal + (ca != cb))
    return row[-1]


def closest_names(
    name: str,
    names: Iterable[str],
    max_distance: int = 2,
    limit: int = 3,
) -> list[str]:
    """
    Registered names within ``max_distance`` edits of ``name``.

    Case is ignored, so ``sortalpha`` finds ``sortAlpha``; ``name`` itself
    is never suggested. Closest names come first, ties alphabetically.
    """
    folded = name.lower()
    scored = sorted(
        (edit_distance(folded, other.lower()), other)
        for other in names
        if other != name and abs(len(other) - len(name)) <= max_distance
    )
    return [other for distance, other in scored if distance <= max_distance][:limit]
