from __future__ import annotations

from typing import List, Sequence

from ..models.hunk import PositionedHunk
from ..utils.text import leading_ws

__all__ = ["reindent_line", "apply_hunks"]


def reindent_line(line: str, reference_line: str, base_indent: str) -> str:
    """
    Move ``line`` onto the indentation of ``reference_line``.

    Whatever indent ``line`` carries beyond ``base_indent`` is kept on top, so
    nested additions keep their shape relative to the first one.
    """
    body = line.strip()
    if not body:
        return ""
    ws = leading_ws(line)
    if ws.startswith(base_indent):
        extra = ws[len(base_indent):]
    else:
        extra = " " * max(0, len(ws) - len(base_indent))
    return leading_ws(reference_line) + extra + body


def _base_indent(additions: Sequence[str]) -> str:
    for add in additions:
        if add.strip():
            return leading_ws(add)
    return ""


def apply_hunks(source_lines: Sequence[str], ordered: Sequence[PositionedHunk]) -> List[str]:
    """
    Single pass over ``source_lines``: untouched spans are copied verbatim,
    each hunk's removals are skipped and its additions re-indented in place.

    ``ordered`` must come from order_hunks (sorted, non-overlapping).
    """
    out: List[str] = []
    cursor = 0
    for ph in ordered:
        out.extend(source_lines[cursor : ph.position])
        hunk = ph.hunk

        if hunk.removals:
            reference = source_lines[ph.position]
        elif ph.position > 0:
            reference = source_lines[ph.position - 1]
        else:
            reference = ""
        base = _base_indent(hunk.additions)

        out.extend(reindent_line(add, reference, base) for add in hunk.additions)
        cursor = ph.end
    out.extend(source_lines[cursor:])
    return out
