# contextpatch/locate/matchers.py
"""
Line-run matchers used by the position cascade.

Every matcher has the signature ``(source_lines, pattern, start_from)`` and
returns the lowest start index >= ``start_from`` where ``pattern`` matches as
a contiguous run, or ``None``. An empty pattern never matches.
"""
from __future__ import annotations

import difflib
from typing import Callable, Optional, Sequence, Tuple

from ..utils.text import eq_loose

__all__ = [
    "Matcher",
    "exact_match",
    "trimmed_match",
    "anchor_match",
    "closest_window",
]

Matcher = Callable[[Sequence[str], Sequence[str], int], Optional[int]]


def _scan(source_lines, pattern, start_from, eq) -> Optional[int]:
    m = len(pattern)
    if m == 0:
        return None
    for i in range(max(0, start_from), len(source_lines) - m + 1):
        if all(eq(source_lines[i + j], pattern[j]) for j in range(m)):
            return i
    return None


def exact_match(source_lines: Sequence[str], pattern: Sequence[str], start_from: int = 0) -> Optional[int]:
    return _scan(source_lines, pattern, start_from, lambda a, b: a == b)


def trimmed_match(source_lines: Sequence[str], pattern: Sequence[str], start_from: int = 0) -> Optional[int]:
    """Like exact_match, ignoring leading/trailing whitespace on every line."""
    return _scan(source_lines, pattern, start_from, eq_loose)


def anchor_match(source_lines: Sequence[str], pattern: Sequence[str], start_from: int = 0) -> Optional[int]:
    """
    Match a run of len(pattern) lines by its first and last line only.

    Interior lines are ignored, so drifted context between two stable
    boundaries still lands. Needs at least three lines to mean anything.
    """
    m = len(pattern)
    if m < 3:
        return None
    first = pattern[0].strip()
    last = pattern[-1].strip()
    for i in range(max(0, start_from), len(source_lines) - m + 1):
        if source_lines[i].strip() == first and source_lines[i + m - 1].strip() == last:
            return i
    return None


def closest_window(source_lines: Sequence[str], pattern: Sequence[str]) -> Tuple[int, float]:
    """
    Best fuzzy window for ``pattern``: (start_index, ratio), or (-1, -1.0).

    Line-wise SequenceMatcher over trimmed lines. Diagnostic only, never
    used to pick a position.
    """
    m = min(len(pattern), len(source_lines))
    if m <= 0:
        return -1, -1.0
    a = [x.strip() for x in pattern[:m]]
    best_idx, best_ratio = -1, -1.0
    for i in range(len(source_lines) - m + 1):
        b = [x.strip() for x in source_lines[i : i + m]]
        ratio = difflib.SequenceMatcher(None, a, b, autojunk=False).ratio()
        if ratio > best_ratio:
            best_idx, best_ratio = i, ratio
    return best_idx, best_ratio
