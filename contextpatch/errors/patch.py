from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from ..models.hunk import Hunk


class PatchFailedError(Exception):
    """Base class for every reason a diff could not be applied."""


class UnlocatablePositionError(PatchFailedError):
    """No tier of the matching cascade found a position for a hunk."""

    def __init__(
        self,
        hunk_index: int,
        hunk: "Hunk",
        closest: Optional[Tuple[int, float]] = None,
    ) -> None:
        self.hunk_index = hunk_index
        self.hunk = hunk
        # (line, similarity) of the nearest window, when one was computed
        self.closest = closest
        context = "\n".join(hunk.context_before[:2])
        removals = "\n".join(hunk.removals[:2])
        super().__init__(
            f"Hunk {hunk_index + 1}: Cannot find matching position.\n"
            f"Context: {context}\n"
            f"Removals: {removals}"
        )


class OverlappingHunksError(PatchFailedError):
    """Two resolved hunks claim intersecting source ranges."""

    def __init__(self, first_index: int, second_index: int) -> None:
        self.first_index = first_index
        self.second_index = second_index
        super().__init__(
            f"Overlapping hunks: Hunk {first_index + 1} overlaps with Hunk {second_index + 1}"
        )
