from __future__ import annotations

from typing import Iterable, List

from ..errors.patch import OverlappingHunksError
from ..models.hunk import PositionedHunk

__all__ = ["order_hunks"]


def order_hunks(positioned: Iterable[PositionedHunk]) -> List[PositionedHunk]:
    """
    Sort resolved hunks by position (ties keep diff order) and reject overlaps.

    Overlapping edits have no defined result, so they are never merged or
    dropped: the whole patch fails instead.

    Raises:
        OverlappingHunksError: if a hunk starts inside the previous one's removals.
    """
    ordered = sorted(positioned, key=lambda p: (p.position, p.original_index))
    for prev, curr in zip(ordered, ordered[1:]):
        if curr.position < prev.end:
            raise OverlappingHunksError(prev.original_index, curr.original_index)
    return ordered
