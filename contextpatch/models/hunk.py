from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Hunk:
    """One localized change: locating context, lines to remove, lines to add."""

    context_before: Tuple[str, ...] = ()
    removals: Tuple[str, ...] = ()
    additions: Tuple[str, ...] = ()
    block_index: int = 0  # which @@@@ block of the diff produced this hunk

    @property
    def has_changes(self) -> bool:
        return bool(self.removals or self.additions)

    @property
    def is_locatable(self) -> bool:
        return bool(self.context_before or self.removals)

    @property
    def is_pure_addition(self) -> bool:
        return not self.removals


@dataclass(frozen=True)
class PositionedHunk:
    """A Hunk annotated with the source line where its removals begin."""

    hunk: Hunk
    position: int
    original_index: int
    tier: str = ""  # cascade tier that located it; diagnostic only

    @property
    def end(self) -> int:
        """Exclusive end of the source range this hunk replaces."""
        return self.position + len(self.hunk.removals)
